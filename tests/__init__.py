# tests/__init__.py
"""
Test suite for the clause realizer.

- Domain and syntax tests build constituent trees by hand and check the
  transformations (relocation, modifier slots, interrogatives).
- Engine tests go through the English engine and compare rendered text.
- Use case, API and CLI tests cover wiring, logging and error reporting.
"""
