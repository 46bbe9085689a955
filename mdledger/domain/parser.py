"""Section-aware parser for markdown bill ledgers.

The ledger is a markdown document. Records live between a start heading and
an end heading; inside that region, date sub-headings open a section and
table rows below them are transactions:

    ## 1. 日常收支
    ### 2023-03-01
    | 分类 1 | 分类 2 | 标签 | 金额 | 备注 |
    | :----: | :----: | :----: | :----: | :----: |
    | 支出 | 餐饮 | 零食、下午茶 | 15.50 | 奶茶 |
    ## 2. 收支汇总

Parsing is a single forward pass driven by an explicit ParseState.
Apart from the start/end log records the functions here have no side
effects.
"""

from collections.abc import Iterable
from enum import Enum

from mdledger.domain.errors import MalformedRowError
from mdledger.domain.models import DateLabel, LedgerConfig
from mdledger.domain.records import DateSections, TransactionRecord
from mdledger.logging_setup import get_logger

logger = get_logger(__name__)

# Splitting "| a | b | c | d | e |" leaves an empty cell before the first
# delimiter, so the five record fields sit at positions 1..5.
_PRIMARY, _SECONDARY, _TAGS, _AMOUNT, _DESCRIPTION = range(1, 6)
_MIN_FIELDS = _DESCRIPTION + 1


class ParseState(Enum):
    """Where the parser is relative to the ledger's data region."""

    OUTSIDE = "outside"
    INSIDE_SECTION = "inside_section"
    DONE = "done"


class LineKind(Enum):
    """How a single trimmed line is interpreted in a given state."""

    BLANK = "blank"
    IGNORED = "ignored"
    START_MARKER = "start_marker"
    END_MARKER = "end_marker"
    DATE_HEADER = "date_header"
    ROW = "row"


def classify_line(line: str, state: ParseState, config: LedgerConfig) -> LineKind:
    """Classify a trimmed line.

    Args:
        line: Line with surrounding whitespace removed.
        state: Current parser state.
        config: Ledger format.

    Returns:
        The LineKind for this line. Outside the data region only the start
        marker is recognised; inside it, the end marker wins over everything.
    """
    if not line:
        return LineKind.BLANK

    if state is ParseState.OUTSIDE:
        if line.startswith(config.start_marker):
            return LineKind.START_MARKER
        return LineKind.IGNORED

    if state is ParseState.DONE:
        return LineKind.IGNORED

    if line.startswith(config.end_marker):
        return LineKind.END_MARKER
    if line.startswith(config.start_marker):
        return LineKind.START_MARKER
    if line.startswith(config.date_prefix):
        return LineKind.DATE_HEADER
    return LineKind.ROW


def transition(state: ParseState, kind: LineKind) -> ParseState:
    """Return the state after consuming a line of the given kind."""
    if state is ParseState.DONE:
        return state
    if kind is LineKind.START_MARKER:
        return ParseState.INSIDE_SECTION
    if kind is LineKind.END_MARKER:
        return ParseState.DONE
    return state


def is_decoration_row(line: str, config: LedgerConfig) -> bool:
    """Check if a row is the table header or the separator line."""
    return config.header_label in line or config.separator_token in line


def split_tags(text: str, delimiter: str) -> tuple[str, ...]:
    """Split a tag cell into trimmed, non-empty tags."""
    return tuple(tag.strip() for tag in text.split(delimiter) if tag.strip())


def parse_row(line: str, date_label: str, config: LedgerConfig) -> TransactionRecord | None:
    """Parse one table row into a record.

    Args:
        line: Trimmed, non-empty table row.
        date_label: Active date label, used only for error context.
        config: Ledger format.

    Returns:
        TransactionRecord, or None if the row is header/separator decoration.

    Raises:
        MalformedRowError: If the row has too few fields.
    """
    if is_decoration_row(line, config):
        logger.debug("Skipping table decoration under %s: %s", date_label, line)
        return None

    fields = line.split(config.field_delimiter)
    if len(fields) < _MIN_FIELDS:
        raise MalformedRowError(line, date_label, len(fields))

    return TransactionRecord(
        primary_category=fields[_PRIMARY],
        secondary_category=fields[_SECONDARY],
        tags=split_tags(fields[_TAGS], config.tag_delimiter),
        amount=fields[_AMOUNT],
        description=fields[_DESCRIPTION],
    )


def parse_ledger(lines: Iterable[str], config: LedgerConfig) -> DateSections:
    """Parse ledger lines into records grouped by date label.

    Args:
        lines: Raw lines of the ledger document, consumed once.
        config: Ledger format.

    Returns:
        Mapping of date label to records in ledger order. A repeated date
        header starts its label over with no records.

    Raises:
        MalformedRowError: On the first data row with too few fields.
    """
    sections: dict[DateLabel, list[TransactionRecord]] = {}
    state = ParseState.OUTSIDE
    current: DateLabel | None = None

    for raw in lines:
        line = raw.strip()
        kind = classify_line(line, state, config)
        state = transition(state, kind)

        if kind is LineKind.START_MARKER:
            logger.info("Reading ledger entries")
        elif kind is LineKind.END_MARKER:
            logger.info("Finished reading ledger entries")
            break
        elif kind is LineKind.DATE_HEADER:
            current = DateLabel(line[len(config.date_prefix) :])
            sections[current] = []
        elif kind is LineKind.ROW:
            if current is None:
                logger.debug("Ignoring row before any date header: %s", line)
                continue
            record = parse_row(line, current, config)
            if record is not None:
                sections[current].append(record)

    return {label: tuple(records) for label, records in sections.items()}
