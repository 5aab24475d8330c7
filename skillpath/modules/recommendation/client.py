"""Recommendation requester - the consumer side of POST /api/ai/recommend-path.

One request per invocation, no automatic retry. While a request is in
flight for a session, a second dispatch for that session is refused.
Responses that arrive after their session was reset or abandoned are
discarded without touching the requester's state.
"""

from dataclasses import dataclass, field
import logging
from typing import Iterable

import httpx

from skillpath.modules.assessment.interface import AssessmentResult
from skillpath.modules.recommendation.interface import (
    RecommendationEnvelope,
    RecommendationRequest,
    RecommendationResponse,
)
from skillpath.shared.constants import (
    DEFAULT_TIME_AVAILABLE,
    GENERIC_SKILL_LABEL,
    RECOMMEND_PATH_ENDPOINT,
    RECOMMENDATION_ERROR_MESSAGE,
    RECOMMENDATION_GOALS,
)
from skillpath.shared.exceptions import (
    RecommendationInFlightError,
    RecommendationRequestError,
)
from skillpath.shared.models import category_label

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecommendationProfile:
    """What the learner tells the recommender about themselves."""

    skills: tuple[str, ...]
    level: str


def profile_from_result(result: AssessmentResult) -> RecommendationProfile:
    """Describe a scored assessment as a recommendation profile.

    The strongest category's label is the only skill sent; a generic label
    stands in when no category was scored.
    """
    if result.strongest_category is None:
        skills: tuple[str, ...] = (GENERIC_SKILL_LABEL,)
    else:
        skills = (category_label(result.strongest_category),)
    return RecommendationProfile(skills=skills, level=result.level.value)


def build_request(
    profile: RecommendationProfile,
    time_available: str = DEFAULT_TIME_AVAILABLE,
) -> RecommendationRequest:
    """Merge the profile with the fixed goals and time budget."""
    return RecommendationRequest(
        skills=list(profile.skills) or [GENERIC_SKILL_LABEL],
        goals=list(RECOMMENDATION_GOALS),
        current_level=profile.level,
        time_available=time_available,
    )


def resolve_courses(
    recommendation: RecommendationResponse,
    known_ids: Iterable[str],
) -> tuple[list[str], int]:
    """Separate recommended course ids into known ones and a count of unknown.

    Unknown ids are counted, never dereferenced.
    """
    known = set(known_ids)
    resolvable = [course_id for course_id in recommendation.courses if course_id in known]
    return resolvable, len(recommendation.courses) - len(resolvable)


@dataclass
class RecommendationRequester:
    """Issues recommendation requests on behalf of one assessment screen.

    Attributes:
        client: HTTP client whose base_url points at the SkillPath API
        recommendation: Last accepted response for the bound session
        last_error: Message of the last failure for the bound session
    """

    client: httpx.AsyncClient
    time_available: str = DEFAULT_TIME_AVAILABLE
    endpoint: str = RECOMMEND_PATH_ENDPOINT
    recommendation: RecommendationResponse | None = None
    last_error: str | None = None
    _session_id: str | None = None
    _pending: set[str] = field(default_factory=set)

    @property
    def session_id(self) -> str | None:
        return self._session_id

    def bind(self, session_id: str) -> None:
        """Attach to a session, clearing anything shown for a previous one."""
        if session_id != self._session_id:
            self._session_id = session_id
            self.recommendation = None
            self.last_error = None

    def abandon(self) -> None:
        """Detach from the current session; late responses will be dropped."""
        self._session_id = None
        self.recommendation = None
        self.last_error = None

    def is_pending(self, session_id: str | None = None) -> bool:
        """Whether a request is in flight (for the given or bound session)."""
        return (session_id or self._session_id) in self._pending

    def can_request(self) -> bool:
        return self._session_id is not None and not self.is_pending()

    async def request_recommendation(
        self,
        profile: RecommendationProfile,
        session_id: str,
    ) -> RecommendationResponse | None:
        """Send one recommendation request for a session.

        Args:
            profile: Skills and level to recommend for
            session_id: Session the request belongs to

        Returns:
            The accepted response, or None if the session was reset or
            abandoned before the response arrived

        Raises:
            RecommendationInFlightError: If a request for the session is pending
            RecommendationRequestError: On transport, HTTP status or parse failure
        """
        if session_id in self._pending:
            raise RecommendationInFlightError(session_id)
        self.bind(session_id)

        payload = build_request(profile, self.time_available).model_dump(
            mode="json", by_alias=True
        )
        self._pending.add(session_id)
        self.last_error = None
        try:
            response = await self.client.post(self.endpoint, json=payload)
            response.raise_for_status()
            envelope = RecommendationEnvelope.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as e:
            if session_id != self._session_id:
                logger.info(f"Dropping failed recommendation for abandoned session {session_id}")
                return None
            self.last_error = RECOMMENDATION_ERROR_MESSAGE
            logger.warning(f"Recommendation request failed: {type(e).__name__}: {e}")
            raise RecommendationRequestError(str(e)) from e
        finally:
            self._pending.discard(session_id)

        if session_id != self._session_id:
            logger.info(f"Dropping stale recommendation for session {session_id}")
            return None

        self.recommendation = envelope.recommendation
        return self.recommendation
