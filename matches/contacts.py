"""
Contact snapshots exchanged once both parties accept a match
"""
NOT_PROVIDED = 'Not provided'
NO_DETAILS = 'No additional details'


def build_donor_info(donor):
    return {
        'email': donor.email,
        'phone': donor.phone or NOT_PROVIDED,
        'location': donor.location or NOT_PROVIDED,
    }


def build_requester_info(requester, blood_request):
    return {
        'email': requester.email,
        'phone': requester.phone or NOT_PROVIDED,
        'location': requester.location or NOT_PROVIDED,
        'urgency': blood_request.urgency,
        'description': blood_request.description or NO_DETAILS,
    }
