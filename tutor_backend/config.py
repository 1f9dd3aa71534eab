# Role: Central configuration module. Loads .env into environment variables and computes runtime flags
# (DEBUG, CHAT_MODE). Importers read tutor_backend.config.* instead of threading flags through every call.

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

from tutor_backend.models.mode import ChatMode

DEBUG: bool = False
CHAT_MODE: ChatMode = ChatMode.CODING_TUTOR


def load_env() -> None:
    """
    Load .env into os.environ, then recompute DEBUG and CHAT_MODE.
    This makes the flags correct even if load_env() is called after import.
    An unknown CHAT_MODE raises ValueError here, so a misconfigured server fails at startup.
    """
    global DEBUG, CHAT_MODE
    load_dotenv()
    # Key line: accept common truthy values.
    DEBUG = os.getenv("DEBUG", "0").lower() in {"1", "true", "yes"}
    CHAT_MODE = ChatMode(os.getenv("CHAT_MODE", ChatMode.CODING_TUTOR.value).strip().lower())

    logging.basicConfig(
        level=logging.DEBUG if DEBUG else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
