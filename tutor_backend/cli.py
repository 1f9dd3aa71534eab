# Role: Local developer CLI to talk to ChatService without the web UI or the HTTP server.
# Useful for checking prompts/tool calls and seeing debug logs in the terminal.

from __future__ import annotations

import json

import tutor_backend.config
tutor_backend.config.load_env()

from tutor_backend.core.chat_service import ChatService
from tutor_backend.core.errors import ChatError
from tutor_backend.models.message import Message


def main() -> None:
    # 1) Create ChatService for the configured mode
    # 2) Keep a local (stripped) history across turns
    # 3) Route user input -> ChatService -> print assistant text and any widget
    print("Tutor Chat CLI")
    print("Commands: /new (clear history), /mode (show mode), /exit")
    print("-" * 50)

    service = ChatService(mode=tutor_backend.config.CHAT_MODE)
    history: list[Message] = []
    print(f"mode: {service.mode.value}")

    while True:
        try:
            user_message = input("\nYou: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not user_message:
            continue

        cmd = user_message.lower()

        if cmd in {"/exit", "exit", "quit", "/quit"}:
            print("Bye!")
            return

        if cmd in {"/new", "new"}:
            history = []
            print("History cleared.")
            continue

        if cmd in {"/mode", "mode"}:
            print(f"mode: {service.mode.value}")
            continue

        try:
            turn = service.handle_turn(user_message, history)
        except (ChatError, RuntimeError) as e:
            print(f"\n[error] {e}")
            continue

        history.append(Message(role="user", content=user_message))
        history.append(Message(role="assistant", content=turn.response))

        print(f"\nAssistant: {turn.response}")
        if turn.widget is not None:
            print(f"\n[{turn.widget.type}]")
            print(json.dumps(turn.widget.data.model_dump(by_alias=True), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
