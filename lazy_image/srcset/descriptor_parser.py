# lazy_image/srcset/descriptor_parser.py
# Responsibility: Turns one descriptor fragment (e.g. "480w 2x") into width/height/density values.

import logging
import re
from typing import Optional

from lazy_image.srcset.models import DescriptorFragment

logger = logging.getLogger(__name__)

INT_PATTERN = re.compile(r"[0-9]+")
# Leading numeric prefix, same leniency as a JS parseFloat
FLOAT_PREFIX_PATTERN = re.compile(r"\s*([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))")


class DescriptorParser:
    """
    Tokenizes descriptor fragments.
    Unknown or malformed tokens are dropped so producers can emit descriptors
    this parser does not understand yet.
    """

    @staticmethod
    def parse(fragment: str) -> DescriptorFragment:
        """
        Parses a whitespace separated descriptor fragment.

        Args:
            fragment (str): Descriptor tokens, e.g. "480w", "2.5x" or "800w 600h".

        Returns:
            DescriptorFragment: Recognized attributes. Later tokens overwrite earlier ones.
        """
        out: DescriptorFragment = {}
        if not fragment:
            return out

        for token in fragment.split():
            unit = token[-1]
            value = token[:-1]

            if unit in ("w", "h") and INT_PATTERN.fullmatch(value):
                out[unit] = int(value)
            elif unit == "x":
                density = DescriptorParser._parse_float(value)
                if density is not None:
                    out[unit] = density
            else:
                logger.debug("[Descriptor] Dropped token %r", token)

        return out

    @staticmethod
    def _parse_float(value: str) -> Optional[float]:
        match = FLOAT_PREFIX_PATTERN.match(value)
        if not match:
            logger.debug("[Descriptor] Dropped density %r", value)
            return None
        number = match.group(1)
        if number.lstrip("+-") == "Infinity":
            return float(number.replace("Infinity", "inf"))
        return float(number)
