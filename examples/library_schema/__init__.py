from .demo import build_schema, run_demo  # noqa: F401

__all__ = ["build_schema", "run_demo"]
