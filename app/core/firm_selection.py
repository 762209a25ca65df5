from dataclasses import dataclass
from typing import Optional, Union
from app.database import MAX_INTEGER_ID
from app.core.exceptions import FirmSelectionInvalid


@dataclass(frozen=True)
class NoFirmRequested:
    pass


@dataclass(frozen=True)
class RequestedFirm:
    firm_id: int


FirmSelection = Union[NoFirmRequested, RequestedFirm]


def _parse_firm_id(raw: str, source: str) -> int:
    try:
        firm_id = int(raw.strip())
    except (AttributeError, ValueError):
        raise FirmSelectionInvalid(f"Firm id from {source} is not an integer: {raw!r}")
    if firm_id <= 0:
        raise FirmSelectionInvalid(f"Firm id from {source} must be positive: {firm_id}")
    if firm_id > MAX_INTEGER_ID:
        raise FirmSelectionInvalid(f"Firm id from {source} is out of range: {firm_id}")
    return firm_id


def parse_firm_selection(
    header_value: Optional[str],
    query_value: Optional[str],
) -> FirmSelection:
    """
    Combine the header and query-string firm selectors into one value.

    Empty values count as absent. When both are supplied they must name
    the same firm; a disagreement is rejected rather than resolved by
    precedence.
    """
    candidates = []
    if header_value not in (None, ""):
        candidates.append(_parse_firm_id(header_value, "header"))
    if query_value not in (None, ""):
        candidates.append(_parse_firm_id(query_value, "query parameter"))

    if not candidates:
        return NoFirmRequested()
    if len(set(candidates)) > 1:
        raise FirmSelectionInvalid(
            f"Firm header and query parameter disagree: {candidates[0]} != {candidates[1]}"
        )
    return RequestedFirm(firm_id=candidates[0])
