"""Credential check that gates the question generator.

The credential pair is a fixed constant shipped with the application. It keeps
casual players out of the authoring view and nothing more.
"""

from __future__ import annotations

from poliplay.constants.ui_constants import GENERATOR_PASSWORD, GENERATOR_USERNAME


def credentials_match(
    username: str,
    password: str,
    expected_username: str = GENERATOR_USERNAME,
    expected_password: str = GENERATOR_PASSWORD,
) -> bool:
    return username == expected_username and password == expected_password
