"""Interactive chat session on top of the matching engine.

This module keeps the presentation side of the assistant:
- an in-memory transcript that starts with a greeting
- static starter prompts ("Schnelleinstieg")
- Rich rendering of answer and fallback responses

Nothing here is persisted; the transcript lives as long as the session.
"""

from __future__ import annotations

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from ..core.engine.matching import MatchingEngine
from ..core.models.chat import ChatMessage
from ..core.models.enums import MessageRole
from ..core.models.response import AgentResponse, AnswerResponse, FallbackResponse
from ..observability.logger import get_logger

logger = get_logger(__name__)

INTRO_MESSAGE = ChatMessage(
    id="welcome",
    role=MessageRole.AGENT,
    content=(
        "Hallo! Ich bin dein Menschen-Agent. Frag mich alles über Biologie, "
        "Psychologie, Kultur, Geschichte oder Gesundheit des Menschen."
    ),
    response=FallbackResponse(
        answer=(
            "Ich kenne ein kuratiertes Wissensnetz über den Menschen und helfe dir "
            "dabei, die richtigen Fakten schnell zu finden."
        ),
        suggestions=(
            "Wie funktioniert das Herz-Kreislauf-System?",
            "Warum sind Emotionen für Menschen wichtig?",
            "Welche Meilensteine prägen die Geschichte der Menschheit?",
        ),
    ),
)

STARTER_PROMPTS: tuple[str, ...] = (
    "Erklär mir, wie das Immunsystem aufgebaut ist.",
    "Was unterscheidet Homo sapiens von früheren Menschenarten?",
    "Wie beeinflusst Schlaf unsere geistige Leistung?",
    "Welche Faktoren formen menschliche Kultur?",
)

EXIT_COMMANDS = {"exit", "quit"}


class ChatSession:
    """One conversation: question in, agent message out, transcript kept."""

    def __init__(self, engine: MatchingEngine):
        self.engine = engine
        self.messages: list[ChatMessage] = [INTRO_MESSAGE]

    def ask(self, question: str) -> ChatMessage | None:
        """Answer a question and append both sides to the transcript.

        Returns:
            The agent message, or None when the question is blank
        """
        trimmed = question.strip()
        if not trimmed:
            return None

        response = self.engine.answer(trimmed)
        agent_message = ChatMessage.from_agent(response)
        self.messages.extend([ChatMessage.from_user(trimmed), agent_message])

        logger.info(
            "chat_turn",
            response_type=response.type,
            entry_id=response.entry.id if isinstance(response, AnswerResponse) else None,
            transcript_length=len(self.messages),
        )
        return agent_message

    def ask_starter(self, number: int) -> ChatMessage | None:
        """Ask one of the starter prompts by its 1-based number."""
        if not 1 <= number <= len(STARTER_PROMPTS):
            return None
        return self.ask(STARTER_PROMPTS[number - 1])


# ---------------------------------------------------------------------- #
# Rendering
# ---------------------------------------------------------------------- #
def render_response(response: AgentResponse) -> Panel:
    """Build a Rich panel for an agent response."""
    if isinstance(response, FallbackResponse):
        body = Text(response.answer)
        body.append("\n\nVorschläge\n", style="bold dim")
        for suggestion in response.suggestions:
            body.append(f"  • {suggestion}\n", style="dim")
        body.rstrip()
        return Panel(body, title="Agent", title_align="left", border_style="yellow")

    entry = response.entry
    header = Text()
    header.append(f" {entry.category} ", style="bold white on grey23")
    header.append("  ")
    header.append(f"Sicherheit: {response.confidence.label}", style="bold")
    header.append(f"\n\n{entry.title}\n", style="bold")
    header.append(response.answer)

    details = Text("\nExtra-Details aus der Wissensbasis\n", style="bold dim")
    for detail in entry.details:
        details.append(f"  • {detail}\n", style="default")

    parts = [header, details]

    if response.matched_keywords:
        keywords = Text("Verstandene Stichworte: ", style="bold dim")
        keywords.append(", ".join(response.matched_keywords), style="dim")
        parts.append(keywords)

    follow_up = Text("\nWeiterführende Fragen\n", style="bold dim")
    for item in response.follow_up:
        follow_up.append(f"  • {item}\n")
    parts.append(follow_up)

    return Panel(Group(*parts), title="Agent", title_align="left", border_style="blue")


def render_message(console: Console, message: ChatMessage) -> None:
    if message.role == MessageRole.USER:
        console.print(Text(f"Du: {message.content}", style="bold"), justify="right")
        return
    if message.response is None:
        console.print(message.content)
        return
    console.print(render_response(message.response))


def run_chat_session(engine: MatchingEngine, console: Console | None = None) -> ChatSession:
    """Launch an interactive chat loop until exit/quit or EOF."""
    console = console or Console()
    session = ChatSession(engine)

    console.print(f"[bold blue]{INTRO_MESSAGE.content}[/bold blue]")
    render_message(console, INTRO_MESSAGE)

    console.print("\n[bold]Schnelleinstieg[/bold] (Nummer eingeben)")
    for number, prompt in enumerate(STARTER_PROMPTS, start=1):
        console.print(f"  [dim]{number}.[/dim] {prompt}")
    console.print("[dim]'exit' beendet den Chat.[/dim]")

    while True:
        try:
            user_input = console.input("\n[bold]Deine Frage:[/bold] ").strip()
        except (EOFError, KeyboardInterrupt):
            console.print("\n[dim]Chat beendet.[/dim]")
            break
        if user_input.lower() in EXIT_COMMANDS:
            console.print("[dim]Bis bald![/dim]")
            break

        agent_message = None
        # Short numbers pick a starter prompt; anything else is a question
        if user_input.isdecimal() and len(user_input) <= 2:
            agent_message = session.ask_starter(int(user_input))
        if agent_message is None:
            agent_message = session.ask(user_input)
        if agent_message is None:
            continue

        render_message(console, session.messages[-2])
        render_message(console, agent_message)

    return session
