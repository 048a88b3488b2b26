"""Acquire ECB rates, falling back to the bundled snapshot when the remote feed fails."""

from __future__ import annotations

from enum import Enum

from ecb_fx.exceptions import FeedParseError, FetchError, NoDataAvailableError
from ecb_fx.ingestion.ecb_xml import EcbXmlParser, is_valid_feed
from ecb_fx.ingestion.models import (
    AcquisitionResult,
    FeedContent,
    Provenance,
    ProvenanceSource,
    RateMapping,
)
from ecb_fx.ingestion.strategy import RateSource
from ecb_fx.utils.logger import get_logger

LOGGER = get_logger(__name__)

REMOTE_INVALID_REASON = "remote content failed structural validation"
LOCAL_INVALID_REASON = "local snapshot failed structural validation"


class AcquisitionState(str, Enum):
    IDLE = "idle"
    FETCHING_REMOTE = "fetching_remote"
    VALIDATING_REMOTE = "validating_remote"
    FETCHING_LOCAL = "fetching_local"
    VALIDATING_LOCAL = "validating_local"
    DONE = "done"
    FAILED = "failed"


class _Acquisition:
    """One pass through the state machine. Never reused across calls."""

    def __init__(self, remote: RateSource, local: RateSource, parser: EcbXmlParser) -> None:
        self.remote = remote
        self.local = local
        self.parser = parser
        self.state = AcquisitionState.IDLE
        self.states: list[AcquisitionState] = [self.state]
        self.content: FeedContent | None = None
        self.reason: str | None = None
        self.warnings: list[str] = []

    def _enter(self, state: AcquisitionState) -> None:
        LOGGER.debug("Acquisition %s -> %s", self.state.value, state.value)
        self.state = state
        self.states.append(state)

    def run(self) -> AcquisitionResult:
        self._enter(AcquisitionState.FETCHING_REMOTE)
        while True:
            if self.state is AcquisitionState.FETCHING_REMOTE:
                self._fetch_remote()
            elif self.state is AcquisitionState.VALIDATING_REMOTE:
                self._validate_remote()
            elif self.state is AcquisitionState.FETCHING_LOCAL:
                self._fetch_local()
            elif self.state is AcquisitionState.VALIDATING_LOCAL:
                self._validate_local()
            elif self.state is AcquisitionState.DONE:
                return self._finish()
            else:
                raise self._failure(self.reason or LOCAL_INVALID_REASON)

    def _fetch_remote(self) -> None:
        try:
            self.content = self.remote.fetch()
        except FetchError as exc:
            self.reason = f"remote fetch failed: {exc.detail}"
            LOGGER.warning("Falling back to local snapshot: %s", self.reason)
            self._enter(AcquisitionState.FETCHING_LOCAL)
            return
        self._enter(AcquisitionState.VALIDATING_REMOTE)

    def _validate_remote(self) -> None:
        assert self.content is not None
        if not is_valid_feed(self.content):
            self.reason = REMOTE_INVALID_REASON
            LOGGER.warning("Falling back to local snapshot: %s (%s)", self.reason, self.content.origin)
            self._enter(AcquisitionState.FETCHING_LOCAL)
            return
        content_type = self.content.content_type
        if not content_type or "xml" not in content_type.lower():
            self.warnings.append(f"remote response content type {content_type!r} is not XML")
        self._enter(AcquisitionState.DONE)

    def _fetch_local(self) -> None:
        self.content = self.local.fetch()
        self._enter(AcquisitionState.VALIDATING_LOCAL)

    def _validate_local(self) -> None:
        assert self.content is not None
        if is_valid_feed(self.content):
            self._enter(AcquisitionState.DONE)
            return
        self.reason = (
            f"{self.reason}; {LOCAL_INVALID_REASON}" if self.reason else LOCAL_INVALID_REASON
        )
        self._enter(AcquisitionState.FAILED)

    def _finish(self) -> AcquisitionResult:
        assert self.content is not None
        source = ProvenanceSource.REMOTE if self.reason is None else ProvenanceSource.LOCAL
        try:
            mapping: RateMapping = self.parser.parse(self.content)
        except FeedParseError as exc:
            self.reason = f"{source.value} feed could not be parsed: {exc}"
            self._enter(AcquisitionState.FAILED)
            raise self._failure(self.reason) from exc
        provenance = Provenance(source=source, reason=self.reason, warnings=tuple(self.warnings))
        LOGGER.info(
            "Loaded %s ECB rates dated %s from %s", len(mapping) - 1, mapping.rate_date, source.value
        )
        return AcquisitionResult(mapping=mapping, provenance=provenance, states=tuple(self.states))

    def _failure(self, reason: str) -> NoDataAvailableError:
        LOGGER.error("No exchange rate data available: %s", reason)
        provenance = Provenance(
            source=ProvenanceSource.UNAVAILABLE, reason=reason, warnings=tuple(self.warnings)
        )
        return NoDataAvailableError(
            f"No data available: {reason}", provenance=provenance, states=tuple(self.states)
        )


class FallbackOrchestrator:
    """Try the remote feed, then the local snapshot, exactly once each.

    ``acquire`` is independent per call: the remote feed is never retried once
    the snapshot has been used, and nothing is cached between calls.
    """

    def __init__(
        self,
        remote: RateSource,
        local: RateSource,
        *,
        parser: EcbXmlParser | None = None,
    ) -> None:
        self.remote = remote
        self.local = local
        self.parser = parser or EcbXmlParser()

    def acquire(self) -> AcquisitionResult:
        """Return parsed rates with provenance or raise :class:`NoDataAvailableError`."""

        return _Acquisition(self.remote, self.local, self.parser).run()


__all__ = [
    "AcquisitionState",
    "FallbackOrchestrator",
    "LOCAL_INVALID_REASON",
    "REMOTE_INVALID_REASON",
]
