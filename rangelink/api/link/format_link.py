"""Selection to link formatter (UNO: single function)."""

from .build_anchor import build_anchor
from .compose_portable_metadata import compose_portable_metadata
from .compute_range_spec import compute_range_spec
from .DelimiterConfig import DelimiterConfig
from .FormattedLink import FormattedLink
from .InputSelection import InputSelection
from .join_with_hash import join_with_hash
from .LinkType import LinkType
from .quote_link import quote_link
from .RangeNotation import RangeNotation
from .Result import Result
from .SelectionType import SelectionType


def format_link(
    path: str,
    input_selection: InputSelection,
    delimiters: DelimiterConfig,
    notation: RangeNotation = RangeNotation.AUTO,
    portable: bool = False,
) -> Result[FormattedLink]:
    """Encode a selection in a file as a link.

    Args:
        path: File path, written as-is before the hash
        input_selection: 0-based selections and their shape
        delimiters: Delimiters to write the link with
        notation: Column compaction override
        portable: Append the delimiters as metadata (``~#~L~-~C~``) so the
            link decodes under any configuration

    Returns:
        Result with the FormattedLink, or the selection error from compute_range_spec

    Example:
        ``src/file.ts`` with lines 9-19 (0-based), columns 4-14 gives
        ``src/file.ts#L10C5-L20C15``.
    """
    spec_result = compute_range_spec(input_selection, notation)
    if not spec_result.success:
        return Result.err(spec_result.error)
    spec = spec_result.value

    anchor = build_anchor(spec, delimiters)
    raw_link = join_with_hash(path, anchor, delimiters, spec.selection_type)
    if portable:
        raw_link += compose_portable_metadata(delimiters, include_position=spec.range_format.has_positions)
        link_type = LinkType.PORTABLE
    elif spec.selection_type == SelectionType.RECTANGULAR:
        link_type = LinkType.RECTANGULAR
    else:
        link_type = LinkType.REGULAR

    return Result.ok(
        FormattedLink(
            link=quote_link(raw_link, path),
            raw_link=raw_link,
            link_type=link_type,
            delimiters=delimiters,
            computed_selection=spec,
            range_format=spec.range_format,
            selection_type=spec.selection_type,
        )
    )
