from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from accounts.decorators import role_required
from accounts.models import Role
from requesters.models import BloodRequest
from requesters.serializers import BloodRequestSerializer, CreateBloodRequestSerializer
from requesters.services import cancel_request, create_request


@api_view(['GET', 'POST'])
@role_required(Role.REQUESTER, message="Only requesters can manage blood requests")
def blood_requests(request):
    """
    GET: the caller's Pending and Cancelled requests (Matched ones move to matched-requests)
    POST: create a request and look for compatible donors
    """
    if request.method == 'POST':
        serializer = CreateBloodRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        blood_request = create_request(request.user, **serializer.validated_data)
        return Response(
            {
                'message': 'Request created successfully. Looking for compatible donors...',
                'request': BloodRequestSerializer(blood_request).data,
                'matches_created': blood_request.matches.count(),
            },
            status=status.HTTP_201_CREATED
        )

    requests = BloodRequest.objects.filter(
        requester=request.user,
        status__in=[BloodRequest.STATUS_PENDING, BloodRequest.STATUS_CANCELLED],
    )
    return Response(BloodRequestSerializer(requests, many=True).data)


@api_view(['GET'])
@role_required(Role.REQUESTER, message="Only requesters can view their matched requests")
def matched_requests(request):
    requests = (
        BloodRequest.objects.filter(requester=request.user, status=BloodRequest.STATUS_MATCHED)
        .select_related('matched_with')
        .order_by('-matched_at')
    )
    return Response(BloodRequestSerializer(requests, many=True).data)


@api_view(['PUT'])
@role_required(Role.REQUESTER, message="Only requesters can cancel their requests")
def cancel(request, request_id):
    cancel_request(request_id, request.user.pk)
    return Response({'message': 'Request cancelled successfully'})
