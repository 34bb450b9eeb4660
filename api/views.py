# api/views.py - admin endpoints
from django.contrib.auth import get_user_model
from django.db.models import Count, Q
from rest_framework import viewsets
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from accounts.models import Role
from api.permissions import IsAdminRole
from api.serializers import AdminBloodRequestSerializer, AdminDonorSerializer, AdminMatchSerializer
from matches.detection import find_and_create_matches
from matches.models import Match
from matches.queries import dashboard_stats
from requesters.models import BloodRequest

User = get_user_model()


class DonorViewSet(viewsets.ReadOnlyModelViewSet):
    """All donors with their current status"""
    serializer_class = AdminDonorSerializer
    permission_classes = [IsAdminRole]

    def get_queryset(self):
        queryset = User.objects.filter(role=Role.DONOR).annotate(
            active_matches=Count(
                'donor_matches',
                filter=Q(donor_matches__status__in=Match.ACTIVE_STATUSES),
            )
        ).order_by('-created_at')
        blood_type = self.request.query_params.get('blood_type')
        if blood_type and blood_type != 'all':
            queryset = queryset.filter(blood_type=blood_type)
        return queryset


class BloodRequestViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = AdminBloodRequestSerializer
    permission_classes = [IsAdminRole]

    def get_queryset(self):
        queryset = BloodRequest.objects.select_related('matched_with').annotate(
            match_count=Count('matches')
        ).order_by('-created_at')
        status_filter = self.request.query_params.get('status')
        if status_filter and status_filter != 'all':
            queryset = queryset.filter(status=status_filter)
        return queryset


class MatchViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = AdminMatchSerializer
    permission_classes = [IsAdminRole]

    def get_queryset(self):
        queryset = Match.objects.select_related('donor', 'requester', 'request').order_by('-created_at')
        status_filter = self.request.query_params.get('status')
        if status_filter and status_filter != 'all':
            queryset = queryset.filter(status=status_filter)
        return queryset


@api_view(['GET'])
@permission_classes([IsAdminRole])
def stats(request):
    """Get dashboard statistics"""
    return Response(dashboard_stats())


@api_view(['POST'])
@permission_classes([IsAdminRole])
def trigger_matches(request):
    """Manual match detection: full scan unless a request or donor id is given"""
    matches_created = find_and_create_matches(
        request_id=request.data.get('request_id'),
        donor_id=request.data.get('donor_id'),
    )
    return Response({
        'message': f'{matches_created} matches created successfully',
        'matches_created': matches_created,
    })
