"""Splitting of comments that exceed the host's maximum comment size."""

import math

# Maximum number of characters in a single pull request comment. Azure DevOps
# does not document its limit, this matches the GitHub client.
MAX_COMMENT_LENGTH = 65536

SEP_END = (
    "\n```\n</details>"
    "\n<br>\n\n**Warning**: Output length greater than max comment size. Continued in next comment."
)
SEP_START = (
    "Continued from previous comment.\n<details><summary>Show Output</summary>\n\n"
    "```diff\n"
)


def split_comment(
    comment: str,
    max_size: int = MAX_COMMENT_LENGTH,
    sep_end: str = SEP_END,
    sep_start: str = SEP_START,
) -> list[str]:
    """
    Split ``comment`` into chunks of at most ``max_size`` characters.

    Every chunk except the last ends with ``sep_end`` and every chunk except
    the first starts with ``sep_start``, so each chunk renders on its own.

    Args:
        comment: Full comment body
        max_size: Maximum length of a single chunk, separators included
        sep_end: Suffix for all but the last chunk
        sep_start: Prefix for all but the first chunk

    Returns:
        Ordered list of chunks; ``[comment]`` when no split is needed

    Raises:
        ValueError: If the separators leave no room for content
    """
    if len(comment) <= max_size:
        return [comment]

    max_with_sep = max_size - len(sep_end) - len(sep_start)
    if max_with_sep <= 0:
        raise ValueError(
            f"max_size {max_size} is too small for separators of length "
            f"{len(sep_end) + len(sep_start)}"
        )

    num_comments = math.ceil(len(comment) / max_with_sep)
    comments = []
    for i in range(num_comments):
        portion = comment[i * max_with_sep:(i + 1) * max_with_sep]
        if i < num_comments - 1:
            portion += sep_end
        if i > 0:
            portion = sep_start + portion
        comments.append(portion)
    return comments
