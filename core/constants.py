"""
Dataset Constants

Limits shared by the dataset store, the HTTP API and the Streamlit forms.
"""

from typing import Final


# ---- Dataset Limits ----

MAX_DATASET_WORDS: Final = 1000
MAX_WORD_LENGTH: Final = 48
MAX_NAME_LENGTH: Final = 80
MAX_USERNAME_LENGTH: Final = 40
MAX_DESCRIPTION_LENGTH: Final = 240


# ---- Query Limits ----

LIST_PAGE_SIZE: Final = 50  # Newest-first cap for every List query


# ---- Practice Session ----

SEARCH_DEBOUNCE_SECONDS: Final = 0.3
CLOSE_MATCH_THRESHOLD: Final = 0.8  # Similarity at which a miss is reported as "close"
