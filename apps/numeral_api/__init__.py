"""Numeral conversion service.

:class:`NumeralAdapter` sits between the HTTP layer and the codec in
:mod:`lib.numerals.codec`.  It turns raw query values into codec calls and
codec outcomes into :class:`~lib.contracts.conversion.ConversionResult`
objects; it performs no conversion itself.

Adapter policy, as opposed to codec behaviour:

* ``arabic`` must consist of ASCII digits only.  Signs, decimal points and
  whitespace are rejected before the codec is called.  Values with more
  than four significant digits are out of range and are never converted.
* ``roman`` is handed over untouched unless ``fold_case`` is enabled in the
  configuration, in which case it is upper-cased first.  Folding applies to
  ASCII input only, so letters such as a dotless ``"ı"`` never become
  Roman digits.
* A missing parameter yields the same error as a malformed one.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Optional

from lib.config.numeral_api_loader import ApiConfig
from lib.contracts.conversion import ArabicResult, ConversionResult, ErrorBody, RomanResult
from lib.numerals import codec
from lib.telemetry.logger import get_logger

log = get_logger(__name__)

DIGITS_RE = re.compile(r"[0-9]+")

SPANISH_MESSAGES: Dict[str, str] = {
    codec.RangeError.code: "El número debe ser un entero entre 1 y 3999.",
    codec.FormatError.code: "El formato del número romano es inválido o excede el rango.",
}


@dataclass
class NumeralAdapter:
    """Translate query values into codec calls and HTTP-shaped results."""

    config: ApiConfig = field(default_factory=ApiConfig)

    def to_roman(self, raw: Optional[str]) -> ConversionResult:
        """Handle ``/a2r``: ``raw`` is the ``arabic`` query value, if any."""

        try:
            if raw is None or DIGITS_RE.fullmatch(raw) is None:
                raise codec.RangeError(codec.RANGE_MESSAGE)
            digits = raw.lstrip("0")
            if len(digits) > len(str(codec.MAX_VALUE)):
                raise codec.RangeError(codec.RANGE_MESSAGE)
            roman = codec.encode(int(digits or "0"))
        except codec.NumeralError as exc:
            return self._reject("a2r", raw, exc)
        return ConversionResult(status_code=200, body=RomanResult(roman=roman))

    def to_arabic(self, raw: Optional[str]) -> ConversionResult:
        """Handle ``/r2a``: ``raw`` is the ``roman`` query value, if any."""

        text = raw
        if text is not None and self.config.fold_case:
            text = text.upper() if text.isascii() else text
        try:
            if text is None:
                raise codec.FormatError(codec.FORMAT_MESSAGE)
            arabic = codec.decode(text)
        except codec.NumeralError as exc:
            return self._reject("r2a", raw, exc)
        return ConversionResult(status_code=200, body=ArabicResult(arabic=arabic))

    def message_for(self, exc: codec.NumeralError) -> str:
        """Return the user-facing text for ``exc`` in the configured language."""

        if self.config.messages == "es":
            return SPANISH_MESSAGES.get(exc.code, str(exc))
        return str(exc)

    def _reject(self, route: str, raw: Optional[str], exc: codec.NumeralError) -> ConversionResult:
        log.info("%s rejected %r (%s)", route, raw, exc.code)
        return ConversionResult(status_code=400, body=ErrorBody(error=self.message_for(exc)))


__all__ = ["NumeralAdapter", "SPANISH_MESSAGES"]
