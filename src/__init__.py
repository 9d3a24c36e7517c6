"""Application Layer.

Infrastructure and application services that orchestrate domain logic.
This layer handles configuration, logging, external APIs (elevation), and
the function-level API consumed by the map presentation layer.
"""
