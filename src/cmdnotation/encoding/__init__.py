"""
Command notation encoding components.

This package renders Command trees and single values back into notation
text, quoting only where a bare term would not read back unchanged.
"""

from cmdnotation.encoding.encoder import (
    encode,
    encode_many,
    encode_option,
    encode_value,
    escape_template,
    escape_template_rn,
)
from cmdnotation.encoding.quoting import (
    autoencode,
    autoencode_name,
    autoencode_option,
    encode_string,
    is_unquoted_safe,
)

__all__ = [
    "autoencode",
    "autoencode_name",
    "autoencode_option",
    "encode",
    "encode_many",
    "encode_option",
    "encode_string",
    "encode_value",
    "escape_template",
    "escape_template_rn",
    "is_unquoted_safe",
]
