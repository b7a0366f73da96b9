"""Vulture whitelist for false positives.

This file contains code that vulture incorrectly flags as unused
but is actually used by frameworks (Pydantic, multiprocessing) that static analysis cannot detect.
"""
# pylint: disable=all
# Pydantic field validators - used by framework via @field_validator decorator
_.parse_string_set  # noqa: F821  # unused method (glossfix/core/config.py:41)
_.expand_paths  # noqa: F821  # unused method (glossfix/core/config.py:51)
_.strip_text  # noqa: F821  # unused method (glossfix/glossary/models.py:25)

# Pydantic model validator - used by framework via @model_validator decorator
_.validate_cross_fields  # noqa: F821  # unused method (glossfix/core/config.py:55)

# Pydantic model_config class variable - read by framework at class definition time
model_config  # noqa: F821  # unused variable (glossfix/core/config.py:37)

# Pool initializer - passed by reference to multiprocessing.Pool
init_worker  # unused function (glossfix/processing/batch.py:18)

# Public API re-exported for callers outside the package
is_valid_word  # unused function (glossfix/core/validation.py:150)
index_pages  # unused function (glossfix/glossary/enrichment.py:147)
