from .schemas import SummaryLength

MAX_TEXT_LENGTH = 50_000

LENGTH_INSTRUCTIONS: dict[str, str] = {
    "short": "in 2-3 sentences",
    "medium": "in 5-7 sentences",
    "long": "in 10-12 sentences",
}


def build_prompt(text: str, length: SummaryLength = "medium") -> str:
    instruction = LENGTH_INSTRUCTIONS[length]
    return (
        f"Please summarize the following text {instruction}. "
        f"Focus on the main points and key information:\n\n{text}"
    )
