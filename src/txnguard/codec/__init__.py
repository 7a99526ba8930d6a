"""Codec adapters over :mod:`stellar_sdk`, consumed by the validators.

``strkey`` decodes checksummed key text; ``assets`` decodes SEP-11
canonical asset lists into intermediate records.
"""
