"""kssgen — style guide generator contract and host tooling."""

__version__ = "0.1.0"
