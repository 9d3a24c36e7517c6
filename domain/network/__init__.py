"""Network Bounded Context.

Responsible for tower and link identity:
- Entities: Tower, TowerLink
- Value Objects: TowerStats
- Services: TowerRegistry (in-memory, frequency-gated linking)
"""
