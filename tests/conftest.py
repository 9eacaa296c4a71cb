import random

import pytest

from classicalcrypto import Plaintext

# "wewillmeetatmidnight" and its encryption under shift key 11
# (Stinson, Cryptography: Theory and Practice, Example 2.1)
STINSON_MSG = "wewillmeetatmidnight"
STINSON_CIPHERTEXT = "HPHTWWXPPELEXTOYTRSE"

ENGLISH_SAMPLE = (
    "itwasthebestoftimesitwastheworstoftimesitwastheageofwisdom"
    "itwastheageoffoolishnessitwastheepochofbeliefitwastheepochofincredulity"
)


@pytest.fixture
def rng():
    return random.Random(20240229)


@pytest.fixture
def english():
    return Plaintext.from_str(ENGLISH_SAMPLE)
