from rest_framework.decorators import api_view
from rest_framework.response import Response

from accounts.decorators import role_required
from accounts.models import Role
from donors.models import DonationHistory
from donors.serializers import AvailabilitySerializer, DonationHistorySerializer
from donors.services import set_donor_availability


# ============================================
# AVAILABILITY TOGGLE
# ============================================
@api_view(['PUT'])
@role_required(Role.DONOR, message="Only donors can update availability")
def update_availability(request):
    serializer = AvailabilitySerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    available = serializer.validated_data['is_available']

    matches_created = set_donor_availability(request.user.pk, available)

    return Response({
        'message': 'Availability updated successfully',
        'status': (
            "You are now available for new blood donation matches" if available
            else "You are now unavailable for blood donation"
        ),
        'matches_created': matches_created,
    })


# ============================================
# DONATION HISTORY
# ============================================
@api_view(['GET'])
@role_required(Role.DONOR, message="Only donors can view donation history")
def donation_history(request):
    history = DonationHistory.objects.filter(donor=request.user)
    return Response(DonationHistorySerializer(history, many=True).data)
