from typing import TextIO

from storefront.cli.exitcodes import EXIT_OK
from storefront.profile.prompter import ProfilePrompter
from storefront.profile.render import render_profile


def run(*, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """
    Ask the profile questions and print the summary card.

    ProfileInputAborted propagates to the CLI entry point (exit code 2).
    """
    prompter = ProfilePrompter(stdin=stdin, stdout=stdout)
    profile = prompter.collect()
    prompter.stdout.write(render_profile(profile))
    return EXIT_OK
