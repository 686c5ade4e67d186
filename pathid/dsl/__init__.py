"""YAML input files for batch encoding.

Use `pathid.dsl.loader.load_batch_yaml` to parse and validate a batch file and
`pathid.dsl.loader.encode_batch` to turn it into identifiers.
"""
