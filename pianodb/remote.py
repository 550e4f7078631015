"""Dataset retrieval from the voicing CDN.

Each dataset is a CSV file served at ``<base_url>/<name>.csv``: one file per
chord type (named by its PCID) holding that type's voicings. Requests are
plain HTTP GETs without retries.
"""

from __future__ import annotations

import logging
import urllib.error
import urllib.request

from pianodb import config
from pianodb.errors import DatasetUnavailable, PcidOutOfRange
from pianodb.models import PitchClassRecord, VoicingRecord
from pianodb.pitch_class import MAX_PCID
from pianodb.records import parse_pitch_class_csv, parse_voicing_csv

logger = logging.getLogger(__name__)


def api_url(endpoint: str, base_url: str | None = None) -> str:
    """Join an endpoint onto the API base URL.

    Examples
    --------
    >>> api_url("72.csv", base_url="https://example.org/")
    'https://example.org/72.csv'
    """
    base = (base_url if base_url is not None else config.API_BASE_URL).rstrip("/")
    return f"{base}/{endpoint.lstrip('/')}"


def fetch_csv(name: str, base_url: str | None = None, timeout: float | None = None) -> str:
    """Download the raw text of ``<name>.csv``.

    Parameters
    ----------
    name : str
        Dataset name without extension (a PCID for voicing files).
    base_url : str | None
        Overrides ``PIANODB_API_URL``.
    timeout : float | None
        Seconds before giving up; overrides ``PIANODB_TIMEOUT``.

    Returns
    -------
    str
        The CSV text, decoded as UTF-8.

    Raises
    ------
    DatasetUnavailable
        If the request fails or the server answers with an error status.
    """
    url = api_url(f"{name}.csv", base_url)
    timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
    logger.debug("GET %s", url)
    try:
        with urllib.request.urlopen(url, timeout=timeout) as response:
            body = response.read()
    except urllib.error.HTTPError as e:
        msg = f"Dataset {name!r} unavailable: HTTP {e.code} from {url}"
        raise DatasetUnavailable(msg) from e
    except OSError as e:
        msg = f"Dataset {name!r} unavailable: {e}"
        raise DatasetUnavailable(msg) from e
    return body.decode("utf-8")


def load_voicings(
    pcid: int,
    base_url: str | None = None,
    timeout: float | None = None,
    legacy: bool = False,
) -> list[VoicingRecord]:
    """Fetch and parse the voicings of one chord type.

    Raises
    ------
    PcidOutOfRange
        If ``pcid`` is outside 0-2047 (checked before any request is made).
    DatasetUnavailable
        If the file cannot be retrieved.
    """
    if isinstance(pcid, bool) or not isinstance(pcid, int) or not 0 <= pcid <= MAX_PCID:
        raise PcidOutOfRange(pcid)
    records = parse_voicing_csv(fetch_csv(str(pcid), base_url, timeout), legacy=legacy)
    logger.info("Loaded %d voicings for PCID %d", len(records), pcid)
    return records


def load_pitch_classes(
    dataset: str,
    base_url: str | None = None,
    timeout: float | None = None,
) -> list[PitchClassRecord]:
    """Fetch and parse a chord-type table."""
    records = parse_pitch_class_csv(fetch_csv(dataset, base_url, timeout))
    logger.info("Loaded %d chord types from %s", len(records), dataset)
    return records
