from .alphabet import LATIN, MODULUS, Alphabet
from .errors import AlphabetError, ClassicalCryptoError, InvalidInput, InvalidKey, KeyErrorReason
from .keys import Key
from .texts import Ciphertext, Plaintext
from .cipher import SymbolPermutationCipher
from .results import Candidate
from .registry import brute_force, cipher_for_key, get_cipher, list_ciphers, register_cipher

__all__ = [
    "LATIN",
    "MODULUS",
    "Alphabet",
    "AlphabetError",
    "ClassicalCryptoError",
    "InvalidInput",
    "InvalidKey",
    "KeyErrorReason",
    "Key",
    "Plaintext",
    "Ciphertext",
    "SymbolPermutationCipher",
    "Candidate",
    "brute_force",
    "cipher_for_key",
    "get_cipher",
    "list_ciphers",
    "register_cipher",
]
