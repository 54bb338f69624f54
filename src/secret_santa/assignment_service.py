import logging
import random
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from .constants import MAX_ATTEMPTS
from .participant import Assignment, Participant, PreviousPairing

logger = logging.getLogger(__name__)


class AssignmentError(Exception):
    """Errors related to the business logic of assignment."""
    pass


class ExhaustedAttemptsError(AssignmentError):
    """No valid set of pairings was found within the attempt limit."""
    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(
            f"Could not generate valid Secret Santa assignments after {attempts} attempts. "
            "This may happen if too many constraints conflict."
        )


# --- Assignment Logic (Business Logic) ---

class AssignmentService:
    """
    Pairs every participant with a gift receiver by rejection sampling.

    Each attempt shuffles the full participant list and keeps the result only
    if nobody draws themselves and no giver -> receiver pair repeats one of
    the previous pairings. Previous pairings are directional: A -> B last year
    does not rule out B -> A.
    """
    def __init__(
        self,
        max_attempts: int = MAX_ATTEMPTS,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        """
        :param max_attempts: Number of shuffles to try before giving up.
        :param rng: Random source to shuffle with. Takes precedence over seed.
        :param seed: Seed for a private random source when rng is not given.
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.max_attempts = max_attempts
        self.rng = rng if rng is not None else random.Random(seed)

    @staticmethod
    def build_forbidden_pairs(previous_pairings: Iterable[PreviousPairing]) -> Set[Tuple[str, str]]:
        return {(p.giver_email, p.receiver_email) for p in previous_pairings}

    def generate(
        self,
        participants: Sequence[Participant],
        previous_pairings: Iterable[PreviousPairing] = (),
    ) -> List[Assignment]:
        """
        Generates one assignment per participant.

        :param participants: Validated participants, at least two.
        :param previous_pairings: Pairings that must not be repeated.
        :raises ExhaustedAttemptsError: If every attempt was rejected.
        :return: Assignments in the same order as participants (as givers).
        """
        forbidden = self.build_forbidden_pairs(previous_pairings)
        givers = list(participants)

        for attempt in range(1, self.max_attempts + 1):
            receivers = list(givers)
            self.rng.shuffle(receivers)

            if self._is_valid(givers, receivers, forbidden):
                logger.info(f"Generated {len(givers)} assignments on attempt {attempt}.")
                return [
                    Assignment(
                        giver_name=giver.name,
                        giver_email=giver.email,
                        receiver_name=receiver.name,
                        receiver_email=receiver.email,
                    )
                    for giver, receiver in zip(givers, receivers)
                ]

            logger.debug(f"Attempt {attempt} rejected.")

        logger.error(f"No valid assignment found after {self.max_attempts} attempts.")
        raise ExhaustedAttemptsError(self.max_attempts)

    @staticmethod
    def _is_valid(
        givers: Sequence[Participant],
        receivers: Sequence[Participant],
        forbidden: Set[Tuple[str, str]],
    ) -> bool:
        for giver, receiver in zip(givers, receivers):
            giver_key = giver.key
            receiver_key = receiver.key
            if giver_key == receiver_key:
                return False
            if (giver_key, receiver_key) in forbidden:
                return False
        return True
