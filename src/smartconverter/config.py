"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (timer delays, digit counts) and
   display strings from being scattered throughout the code.
2. Tests: The tests import the same constants the application uses.

Exports:
    ORG_ID, APP_ID, VISIBLE_APP_NAME: Qt application identity.
    HIGHLIGHT_DURATION_MS (int): How long a copied card stays highlighted.
    MAX_FRACTION_DIGITS (int): Maximum fraction digits of a displayed result.
    EMPTY_DISPLAY (str): What is shown for an empty input.
"""

ORG_ID: str = "smartconverter"
APP_ID: str = "smartconverter"
VISIBLE_APP_NAME: str = "SmartConverter"
HEADER_TITLE: str = "CONVERTER"
INPUT_HINT: str = "Tap to enter value"
FOOTER_TEXT: str = "Designed Gabriel Romero"

HIGHLIGHT_DURATION_MS: int = 2000

MAX_FRACTION_DIGITS: int = 2

EMPTY_DISPLAY: str = "0"
