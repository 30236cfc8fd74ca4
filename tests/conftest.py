import pytest

from periodcrack.classical.polyalphabetic.keys import encrypt
from periodcrack.core.scoring import get_tetragram_table
from periodcrack.core.utils import normalize_az

PLAINTEXT = normalize_az(
    "The lighthouse keeper climbed the narrow stairs every evening just before the sun went down. "
    "There were one hundred and twelve steps, and he had counted them so many times that he no longer "
    "needed to think about it. At the top he trimmed the wick, polished the great glass lens, and lit "
    "the lamp that would burn until morning. Then he sat by the small window and watched the ships pass "
    "along the coast. Some of them were fishing boats returning to the harbour, others were cargo "
    "steamers bound for distant ports, and once in a while there was a tall sailing ship with white "
    "canvas spread against the darkening sky. He wrote the name of every vessel in a heavy book that he "
    "kept on the table beside his chair, together with the time it passed and the state of the weather. "
    "Nobody had ever asked him to keep this record, and nobody had ever read it, but he kept it "
    "faithfully for forty years. When he finally retired, the book was sent to the museum in the town, "
    "where it can still be seen in a glass case near the entrance."
)

KEY = [
    "PGFYSDOMICUJRQBTVNWEKHLAXZ",
    "ESFMDROWBHJKQXZINUPAYGCTLV",
    "ERDSYGMJCHAKLTQOVWUIBXPFNZ",
]


@pytest.fixture(scope="session")
def table():
    return get_tetragram_table()


@pytest.fixture
def plaintext():
    return PLAINTEXT


@pytest.fixture
def key():
    return list(KEY)


@pytest.fixture
def ciphertext():
    return encrypt(PLAINTEXT, KEY)
