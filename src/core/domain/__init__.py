"""Domain models and vocabularies.

- Pure, strict data structures (Pydantic v2) describing declarations and the
  documentation built from them.
- The domain knows nothing about HTTP, subprocesses or the CLI.
"""
