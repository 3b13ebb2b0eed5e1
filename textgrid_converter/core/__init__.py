"""Core parsing modules.

WHY: The core package contains the stable heart of the converter:
the token and row dataclasses and the three parsing stages. These are
consumed by the reader wrappers, the batch runner and all formatters.

HOW: ir.py defines the data structures, grammar.py the fixed offsets of
the positional format, lexer.py / validator.py / assembler.py the three
pipeline stages, encoding.py and reader.py the file-facing wrappers,
batch.py the multi-file runner.

RULES:
- IR dataclasses are the contract: change with care
- lexer, validator and assembler do no I/O
- Errors are raised from errors.py types only (plus TypeError for
  token-variant mismatches inside the assembler)
"""
