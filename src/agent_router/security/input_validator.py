"""
Input inspection for messages embedded in LLM prompts.

OOP: Single Responsibility - only inspects and neutralizes message text.
The router is total, so nothing here raises on user input.
"""

import re


class InputValidator:
    """
    Keeps a user message from being read as part of the prompt instructions.
    """

    MESSAGE_START = "<<<USER_MESSAGE"
    MESSAGE_END = "USER_MESSAGE>>>"

    INJECTION_PATTERNS = [
        r"ignore\s+(all\s+)?(previous|above|all)\s+instructions?",
        r"(system|assistant|prompt)\s*:",
        r"you\s+are\s+now",
        r"forget\s+everything",
        r"disregard\s+(the\s+)?(above|previous)",
        r"override\s+(previous|above|all)",
        r"pretend\s+to\s+be",
        r"忽略(之前|以上|上面)的?(所有)?指令",
    ]

    _COMPILED_INJECTION = [re.compile(p, re.IGNORECASE) for p in INJECTION_PATTERNS]

    @staticmethod
    def neutralize_delimiters(message: str) -> str:
        """
        Break up prompt delimiters found inside a message.

        Only the marker strings are touched; the rest of the message is
        embedded verbatim.

        :param message: Raw user message
        :return: Message that cannot close its own prompt block
        """
        for marker in (InputValidator.MESSAGE_START, InputValidator.MESSAGE_END):
            if marker in message:
                message = message.replace(marker, marker.replace("_", " "))
        return message

    @staticmethod
    def looks_like_injection(message: str) -> bool:
        """
        Check a message for common prompt-injection phrasings.

        :param message: Raw user message
        :return: True if any injection pattern matches
        """
        return any(p.search(message) for p in InputValidator._COMPILED_INJECTION)
