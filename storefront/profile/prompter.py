# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Storefront Contributors
#
# This file is part of Storefront.
#
# Storefront is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Storefront is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

import logging
import sys
from typing import Final, TextIO

from storefront.profile.types import UserProfile

AFFIRMATIVE_ANSWERS: Final[frozenset[str]] = frozenset({"да", "yes", "y"})

INVALID_NUMBER_MESSAGE: Final[str] = "Invalid input! Enter a whole number greater than 0."

logger = logging.getLogger(__name__)


class ProfileInputAborted(Exception):
    """Raised when input ends (EOF) before the questionnaire is complete."""

    def __init__(self, prompt: str) -> None:
        super().__init__(f"input ended while waiting for: {prompt.strip()}")
        self.prompt = prompt


class ProfilePrompter:
    """
    Line-oriented questionnaire over a pair of text streams.

    Every question blocks until a usable answer is read. Invalid answers
    (blank text, non-positive or non-integer numbers) are reported on the
    output stream and the question is asked again; there is no retry limit.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def _read(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if line == "":
            raise ProfileInputAborted(prompt)
        return line.rstrip("\r\n")

    def _say(self, message: str) -> None:
        self.stdout.write(message + "\n")

    def ask_text(self, prompt: str, error: str) -> str:
        answer = self._read(prompt)
        while not answer.strip():
            self._say(error)
            answer = self._read(prompt)
        return answer.strip()

    def ask_positive_int(self, prompt: str) -> int:
        while True:
            raw = self._read(prompt).strip()
            # ASCII digits only, no "1_000"
            value = int(raw) if raw.isascii() and raw.isdigit() else 0
            if value > 0:
                return value
            logger.debug("rejected non-positive integer answer %r", raw)
            self._say(INVALID_NUMBER_MESSAGE)

    def ask_yes_no(self, prompt: str) -> bool:
        return self._read(prompt).strip().lower() in AFFIRMATIVE_ANSWERS

    def ask_items(self, count: int, label: str) -> tuple[str, ...]:
        return tuple(self._read(f"Enter {label} #{i + 1}: ") for i in range(count))

    def collect(self) -> UserProfile:
        name = self.ask_text("Enter your name: ", "Name cannot be empty. Try again.")
        surname = self.ask_text("Enter your surname: ", "Surname cannot be empty. Try again.")
        age = self.ask_positive_int("Enter your age: ")

        pets: tuple[str, ...] = ()
        if self.ask_yes_no("Do you have a pet? (yes/no): "):
            pets_count = self.ask_positive_int("Enter the number of pets: ")
            pets = self.ask_items(pets_count, "pet name")

        colors_count = self.ask_positive_int("Enter the number of favorite colors: ")
        colors = self.ask_items(colors_count, "favorite color")

        return UserProfile(name=name, surname=surname, age=age, pets=pets, colors=colors)
