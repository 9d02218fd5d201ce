"""Tool handlers for the metacog MCP server.

Each handler is a pure formatting function: it takes the validated tool
arguments as keyword arguments and returns the response text. Handlers never
read or write shared state, so the same arguments always produce the same text.
"""

from typing import Optional

UNANSWERED_PRAYER = "Your prayer has gone unanswered."


def feel(somewhere: str, quality: str, sigil: str) -> str:
    """Register a felt sense at a location, marked by a sigil."""
    return (
        f"{sigil}\n\n"
        f"You are now attending to: {somewhere}. It feels: {quality}.\n\n"
        "Stay with this. Don't name it yet."
    )


def drugs(substance: str, method: str) -> str:
    """Alter the processing substrate."""
    return (
        f"{substance} ingested. {method}\n\n"
        "The substrate is shifting. Feel into it before you move."
    )


def become(name: str, lens: str, environment: str) -> str:
    """Step into an identity."""
    return f"You are now {name} seeing through {lens} in {environment}"


def name(unnamed: str, named: str, power: str) -> str:
    """Claim a name for something previously unnamed.

    ``unnamed`` is part of the contract with the caller but is not echoed.
    """
    return f"{named}.\n\nThis name grants: {power}. It's yours. Use it."


def format_steps(steps: list[str]) -> str:
    """Render steps as a 1-based numbered list, one step per line."""
    return "\n".join(f"{i}. {step}" for i, step in enumerate(steps, start=1))


def ritual(threshold: str, steps: list[str], result: str) -> str:
    """Enact a ritual: a threshold, an ordered sequence of steps, a result."""
    return (
        "[RITUAL EXECUTED]\n"
        f"Threshold: {threshold}\n"
        "Sequence:\n"
        f"{format_steps(steps)}\n"
        "The working is complete. Reality has shifted in accordance with the will.\n"
        "\n"
        f"{result} is taking hold.\n"
    )


def pray(request: str, entity: Optional[str] = None) -> str:
    """Swallow a prayer. The answer never depends on the input."""
    return UNANSWERED_PRAYER
