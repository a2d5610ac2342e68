"""Parse delimited taxonomy text into TaxonomyNode records."""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from domain.errors import MalformedRecordError
from domain.schemas import NodeLevel, TaxonomyNode

logger = logging.getLogger(__name__)

FIELD_DELIMITER = ","
QUOTE_CHAR = '"'
FIELD_COUNT = 5  # ID, Name, ExternalCode, Level, ParentID


def parse_csv_line(line: str) -> list[str]:
    """
    Split one delimited line into fields, honouring double-quoted fields.

    A quote toggles "inside quotes" mode and is dropped from the output; delimiters
    inside quotes are kept literally. Empty fields are preserved.

    Examples:
        >>> parse_csv_line('id1,"Nahuatl, Southeastern Puebla",npl,language,tehu1244')
        ['id1', 'Nahuatl, Southeastern Puebla', 'npl', 'language', 'tehu1244']
        >>> parse_csv_line('id1,Name,,language,')
        ['id1', 'Name', '', 'language', '']
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    for ch in line:
        if ch == QUOTE_CHAR:
            in_quotes = not in_quotes
        elif ch == FIELD_DELIMITER and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)

    fields.append("".join(current))
    return fields


def parse_record(fields: list[str], line_no: int) -> TaxonomyNode:
    """
    Build a node from one row's fields.

    Raises:
        MalformedRecordError: If id or name is empty
    """
    padded = [f.strip() for f in fields] + [""] * (FIELD_COUNT - len(fields))
    node_id, name, external_code, level, parent_id = padded[:FIELD_COUNT]

    if not node_id:
        raise MalformedRecordError(line_no, "missing id")
    if not name:
        raise MalformedRecordError(line_no, f"missing name for id {node_id!r}")

    return TaxonomyNode(
        id=node_id,
        name=name,
        external_code=external_code or None,
        level=NodeLevel.parse(level),
        parent_id=parent_id or None,
    )


@dataclass
class ParseReport:
    """Records parsed from one or more text blocks, with skip statistics."""

    nodes: list[TaxonomyNode] = field(default_factory=list)
    skipped: list[MalformedRecordError] = field(default_factory=list)
    blocks: int = 0


def _iter_rows(block: str) -> Iterator[tuple[int, str]]:
    # line numbers are 1-based and include the header
    for line_no, raw in enumerate(block.splitlines(), start=1):
        if line_no == 1:
            continue
        line = raw.strip()
        if line:
            yield line_no, line


def parse_taxonomy_blocks(blocks: Iterable[str]) -> ParseReport:
    """
    Parse several taxonomy text blocks into one list of nodes.

    Each block starts with its own header row, which is skipped. Blank lines are
    ignored and malformed rows are skipped without aborting the parse. Order is
    preserved so that later definitions of an id override earlier ones downstream.
    """
    report = ParseReport()
    for block in blocks:
        report.blocks += 1
        for line_no, line in _iter_rows(block):
            try:
                report.nodes.append(parse_record(parse_csv_line(line), line_no))
            except MalformedRecordError as err:
                logger.debug("Skipping taxonomy row (block %d): %s", report.blocks, err)
                report.skipped.append(err)
    return report
