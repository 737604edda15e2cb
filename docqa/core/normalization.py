"""
Prompt normalization shared by the query store and the prompt cache.

Both keyspaces must agree on what counts as "the same question".

Dependencies: None
System role: Canonical prompt form for de-duplication
"""


def normalize_prompt(prompt: str) -> str:
    """
    Lowercase and trim a prompt.

    Args:
        prompt: Raw user question

    Returns:
        str: Normalized prompt used for lookups and cache keys
    """
    return prompt.strip().lower()
