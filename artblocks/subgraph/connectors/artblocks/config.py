"""Shared Art Blocks connector constants.

Endpoint URL, page size and the location of the packaged contract list live
here so the client itself stays small and focused.
"""

from __future__ import annotations

from pathlib import Path

from artblocks.subgraph.core import CurationStatus

API_URL = "https://api.thegraph.com/subgraphs/name/artblocks/art-blocks"

# The subgraph rejects `first` values above 1000
MAX_PROJECTS_PER_QUERY = 1000

# Safety net against a source that never returns a short page
MAX_PAGES_PER_CONTRACT = 100

DEFAULT_TIMEOUT = 30.0

FACTORY_CURATION_STATUS = CurationStatus.FACTORY.value

CORE_CONTRACTS_FILE = Path(__file__).with_name("core_contracts.json")
