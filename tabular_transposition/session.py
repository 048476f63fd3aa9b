"""
Interactive Session
===================
The console loop around the cipher: read plaintext and key, show the
encryption table, optionally decrypt, repeat.

Every prompt follows the same pattern: read, validate, and on a
TranspositionError report the message and ask again. Input and output
are injectable so the loop can be driven by a script.
"""

import logging
from typing import Callable

from .cipher import TranspositionCipher, normalize_text
from .errors import (
    InvalidKeyFormat,
    InvalidKeyPermutation,
    LengthMismatch,
    NonAlphabeticInput,
)
from .key import Key

logger = logging.getLogger(__name__)

KEY_PROMPT = 'Enter numeric key (e.g. "3 1 2" or "312" for 3 columns): '


class InteractiveSession:
    """Prompt-driven encrypt/decrypt rounds."""

    def __init__(self, input_fn: Callable[[str], str] = input,
                 output_fn: Callable[[str], None] = print,
                 filler: str = None):
        self._input  = input_fn
        self._output = output_fn
        self._filler = filler
        self.rounds  = 0

    # ── prompts ──────────────────────────────────────────────────────────────

    def read_plaintext(self) -> str:
        while True:
            raw = self._input("Enter plaintext (letters only): ")
            try:
                return normalize_text(raw, "plaintext")
            except NonAlphabeticInput:
                self._output("Invalid input! Only letters are allowed.\n")

    def read_ciphertext(self) -> str:
        while True:
            raw = self._input("Enter ciphertext (letters only): ")
            try:
                return normalize_text(raw, "ciphertext")
            except NonAlphabeticInput:
                self._output("Invalid input! Only letters are allowed.\n")

    def read_key(self) -> Key:
        while True:
            raw = self._input(KEY_PROMPT)
            try:
                return Key.parse(raw)
            except InvalidKeyFormat as e:
                self._output(f"{e}\n")
            except InvalidKeyPermutation as e:
                self._output(
                    f"Invalid key! Provide a permutation of 1..{len(e.ranks)} (e.g. 3 1 2).\n"
                )
                logger.debug(f"Rejected key {raw!r}: {e}")

    def ask_yes_no(self, prompt: str) -> bool:
        while True:
            choice = self._input(prompt).strip().lower()
            if choice in ("y", "n"):
                return choice == "y"
            self._output("Invalid choice! Please enter 'y' or 'n'.")

    # ── rounds ───────────────────────────────────────────────────────────────

    def run_round(self) -> None:
        plaintext = self.read_plaintext()
        key       = self.read_key()
        cipher    = TranspositionCipher(key, self._filler)

        ciphertext, rows = cipher.encrypt(plaintext)
        self.rounds += 1
        logger.debug(f"Round {self.rounds}: {len(plaintext)} letters, {len(key)} columns")

        self._output("\n=== Encryption Table ===")
        for row in rows:
            self._output(row)
        self._output(f"Ciphertext: {ciphertext}")

        if not self.ask_yes_no("\nDo you want to decrypt the message? (y/n): "):
            return

        which = self._input(
            "Press 1 to decrypt the ciphertext just produced, "
            "or 2 to enter ciphertext manually (1/2): "
        ).strip()
        target = self.read_ciphertext() if which == "2" else ciphertext

        try:
            plain, rows = cipher.decrypt(target)
        except LengthMismatch as e:
            self._output(f"Error: {e}\n")
            logger.debug(f"Decryption skipped: {e}")
            return

        self._output("\n=== Decryption Table ===")
        for row in rows:
            self._output(row)
        self._output(f"Decrypted Text: {plain}")

    def run(self) -> int:
        """Run rounds until the user declines or input ends. Returns rounds played."""
        logger.info("Interactive session started")
        try:
            while True:
                self.run_round()
                if not self.ask_yes_no("\nDo you want to encrypt another message? (y/n): "):
                    break
        except EOFError:
            logger.info("Input closed")
        self._output("Exiting...")
        logger.info(f"Interactive session ended after {self.rounds} round(s)")
        return self.rounds
