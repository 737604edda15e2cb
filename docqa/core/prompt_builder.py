"""
Grounded prompt assembly.

Builds the single text prompt sent to the generation provider: the
instruction restricting answers to the document, the ranked chunks inside
context markers, then the user question.

Dependencies: langchain_core.prompts
System role: Prompt template for document-grounded answers
"""

from langchain_core.prompts import PromptTemplate

from docqa.models.embedding import ScoredChunk

NOT_FOUND_ANSWER = "Answer not found in document. Please try with a different query."

SYSTEM_PROMPT = (
    "You are an assistant that answers ONLY from the provided document context. "
    f'If the answer is not present, say: "{NOT_FOUND_ANSWER}"'
)

CONTEXT_START_MARKER = "--- DOCUMENT CONTEXT ---:"
CONTEXT_END_MARKER = "--- END DOCUMENT CONTEXT ---"
QUESTION_LABEL = "Question:"

GROUNDED_ANSWER_PROMPT = PromptTemplate.from_template(
    "{system_prompt}\n"
    "{context_start}\n"
    "{context}\n"
    "{context_end}\n"
    "\n"
    "{question_label}\n"
    "{question}"
)


def format_context(ranked: list[ScoredChunk]) -> str:
    """
    Render ranked chunks as numbered context blocks.

    Blocks are numbered from 1 in rank order and separated by a blank line.
    """
    return "\n\n".join(
        f"[{position}]\n{item.chunk.text}"
        for position, item in enumerate(ranked, start=1)
    )


def build_prompt(question: str, ranked: list[ScoredChunk]) -> str:
    """
    Assemble the final generation prompt.

    Args:
        question: User question as submitted
        ranked: Chunks ordered by relevance, most relevant first

    Returns:
        str: Prompt text for the generation provider
    """
    return GROUNDED_ANSWER_PROMPT.format(
        system_prompt=SYSTEM_PROMPT,
        context_start=CONTEXT_START_MARKER,
        context=format_context(ranked),
        context_end=CONTEXT_END_MARKER,
        question_label=QUESTION_LABEL,
        question=question,
    )
