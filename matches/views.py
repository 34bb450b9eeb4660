from rest_framework.decorators import api_view
from rest_framework.response import Response

from matches.queries import active_matches_for, pending_matches_for
from matches.resolver import respond_to_match
from matches.serializers import MatchResponseSerializer, MatchSerializer


@api_view(['GET'])
def pending_matches(request):
    """Matches waiting on the caller's answer"""
    matches = pending_matches_for(request.user)
    return Response(MatchSerializer(matches, many=True).data)


@api_view(['GET'])
def active_matches(request):
    """Confirmed matches with exchanged contact details"""
    matches = active_matches_for(request.user)
    return Response(MatchSerializer(matches, many=True).data)


@api_view(['POST'])
def respond(request, match_id):
    serializer = MatchResponseSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    match = respond_to_match(match_id, request.user.pk, serializer.validated_data['response'])

    return Response({
        'message': 'Response recorded successfully',
        'match': MatchSerializer(match).data,
    })
