"""
Dot-segment normalization.

Collapses ``.`` and ``..`` segments and redundant separators of a
separator-delimited string. The input is expected to have its root (if any)
already removed; callers reattach it.
"""

from typing import Callable


def normalize_string(
    path: str,
    allow_above_root: bool,
    separator: str,
    is_separator: Callable[[str], bool]
) -> str:
    """Normalize the segments of ``path``.

    Args:
        path: Path without its root.
        allow_above_root: Keep leading ``..`` segments that cannot be
            collapsed (relative paths). When false they are dropped, since
            climbing above the root is a no-op.
        separator: Separator used to join the output segments.
        is_separator: Predicate recognizing a separator in the input.

    Returns:
        The normalized segments joined with ``separator``. Empty input, or
        input that collapses to nothing, yields an empty string.

    Examples:
        >>> normalize_string("a/./b/../c", True, "/", lambda c: c == "/")
        'a/c'
        >>> normalize_string("../../x", False, "/", lambda c: c == "/")
        'x'
    """
    res = ""
    last_segment_length = 0
    last_slash = -1
    # -1 once the current segment has a non-dot character
    dots = 0
    code = ""
    length = len(path)

    for i in range(length + 1):
        if i < length:
            code = path[i]
        elif is_separator(code):
            break
        else:
            # virtual trailing separator flushes the last segment
            code = separator

        if not is_separator(code):
            if code == "." and dots != -1:
                dots += 1
            else:
                dots = -1
            continue

        if last_slash == i - 1 or dots == 1:
            # empty segment or "."
            pass
        elif dots == 2:
            ends_with_parent = (
                len(res) >= 2
                and last_segment_length == 2
                and res.endswith("..")
            )
            if not ends_with_parent:
                if len(res) > 2:
                    last_sep_index = res.rfind(separator)
                    if last_sep_index == -1:
                        res = ""
                        last_segment_length = 0
                    else:
                        res = res[:last_sep_index]
                        last_segment_length = len(res) - 1 - res.rfind(separator)
                    last_slash = i
                    dots = 0
                    continue
                elif res:
                    res = ""
                    last_segment_length = 0
                    last_slash = i
                    dots = 0
                    continue
            if allow_above_root:
                res = res + separator + ".." if res else ".."
                last_segment_length = 2
        else:
            segment = path[last_slash + 1:i]
            res = res + separator + segment if res else segment
            last_segment_length = i - last_slash - 1

        last_slash = i
        dots = 0

    return res
