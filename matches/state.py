"""
Match state machine.

The overall status of a match is derived from the two independent
responses; it is never set directly except for the expired state.
"""
from matches.exceptions import InvalidState, ValidationError
from matches.models import DONOR, REQUESTER, Match

ACCEPTED = Match.Response.ACCEPTED
REJECTED = Match.Response.REJECTED
PENDING = Match.Response.PENDING

DECISIONS = (ACCEPTED, REJECTED)
PARTIES = (DONOR, REQUESTER)


def validate_decision(decision):
    if decision not in DECISIONS:
        raise ValidationError("Response must be 'accepted' or 'rejected'")
    return Match.Response(decision)


def derive_status(donor_response, requester_response, acting_party, decision):
    """
    Compute the overall match status after one party responds.

    Args:
        donor_response: donor's stored response before this decision
        requester_response: requester's stored response before this decision
        acting_party: 'donor' or 'requester'
        decision: 'accepted' or 'rejected'

    Returns:
        The new Match.Status value

    Raises:
        ValidationError for an unknown party or decision,
        InvalidState if the acting party already answered
    """
    decision = validate_decision(decision)
    if acting_party not in PARTIES:
        raise ValidationError(f"Unknown party: {acting_party}")

    own, other = (
        (donor_response, requester_response) if acting_party == DONOR
        else (requester_response, donor_response)
    )
    if own != PENDING:
        raise InvalidState(f"You have already {own} this match.")

    if decision == REJECTED:
        return Match.Status(f'{acting_party}_rejected')

    if other == ACCEPTED:
        return Match.Status.BOTH_ACCEPTED

    return Match.Status(f'{acting_party}_accepted')
