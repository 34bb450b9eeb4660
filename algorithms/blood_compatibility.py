"""
Blood Type Compatibility Helper
Determines which donor blood types may supply a requested blood type
"""

BLOOD_TYPES = ['A+', 'A-', 'B+', 'B-', 'AB+', 'AB-', 'O+', 'O-']

# Requested (recipient) blood type -> donor blood types that can supply it
COMPATIBLE_DONORS = {
    'A+': frozenset(['A+', 'A-', 'O+', 'O-']),
    'A-': frozenset(['A-', 'O-']),
    'B+': frozenset(['B+', 'B-', 'O+', 'O-']),
    'B-': frozenset(['B-', 'O-']),
    'AB+': frozenset(['A+', 'A-', 'B+', 'B-', 'AB+', 'AB-', 'O+', 'O-']),  # Universal recipient
    'AB-': frozenset(['A-', 'B-', 'AB-', 'O-']),
    'O+': frozenset(['O+', 'O-']),
    'O-': frozenset(['O-']),
}


def compatible_donor_types(requested_blood_type):
    """
    Get the set of donor blood types that can supply a request

    Args:
        requested_blood_type: Blood type needed by the requester (e.g., 'A+')

    Returns:
        frozenset of donor blood types; empty for an unknown type
    """
    return COMPATIBLE_DONORS.get(requested_blood_type, frozenset())


def is_compatible(donor_blood_type, recipient_blood_type):
    """
    Check if donor blood type is compatible with recipient

    Returns:
        Boolean: True if compatible, False otherwise
    """
    return donor_blood_type in compatible_donor_types(recipient_blood_type)


def get_compatible_recipients(donor_blood_type):
    """
    Get list of requested blood types this donor can supply
    """
    return [
        recipient_type
        for recipient_type, donor_types in COMPATIBLE_DONORS.items()
        if donor_blood_type in donor_types
    ]
