"""Static vocabularies and bounds for workout notes parsing."""

from __future__ import annotations

# Annotation keywords, matched as case-insensitive substrings; first hit wins.
NOTE_KEYWORDS = [
    "douleur",
    "allongé",
    "normal",
    "arrêté",
    "difficile",
    "facile",
    "échec",
    "ras",
    "pause",
    "tempo",
]

# Footer lines starting with these words never become exercise headers.
SUMMARY_KEYWORDS = ["total", "volume", "commentaire", "note"]

BODYWEIGHT_NOTE = "à vide"
SKIPPED_NOTE = "non réalisé"

MIN_SET_INDEX = 1
MAX_SET_INDEX = 20

OUTPUT_FORMATS = ("pretty", "json", "preview")

SUPPORTED_FORMATS = """\
Supported formats:

1. Standard session:
   Séance 09/01
   DC incliné
   1-24kg 6
   2-22kg 11
   3-20kg

2. Session with year:
   Séance 09/01/2025

3. Bodyweight sets:
   Tractions
   1-à vide 8
   2-à vide 10

4. Skipped sets:
   1-X

5. Sets with notes:
   1-40kg 10 douleur
   2-35kg allongé

6. Alternating sides:
   Fentes sautées
   1-15/15
   2-15/15

7. Timed sets:
   Gainage
   1-3min
   2-1min30
   3-45s
"""
