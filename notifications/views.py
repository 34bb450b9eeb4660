from django.shortcuts import get_object_or_404
from django.utils import timezone
from rest_framework.decorators import api_view
from rest_framework.response import Response

from matches.queries import notifications_for
from .models import Notification
from .serializers import NotificationSerializer


@api_view(['GET'])
def notification_list(request):
    """Latest notifications for the caller"""
    notifications = notifications_for(request.user)
    return Response(NotificationSerializer(notifications, many=True).data)


@api_view(['POST'])
def mark_notification_read(request, notification_id):
    notification = get_object_or_404(Notification, pk=notification_id, user=request.user)
    if not notification.is_read:
        notification.is_read = True
        notification.read_at = timezone.now()
        notification.save(update_fields=['is_read', 'read_at'])
    return Response(NotificationSerializer(notification).data)


@api_view(['POST'])
def mark_all_notifications_read(request):
    updated = Notification.objects.filter(user=request.user, is_read=False).update(
        is_read=True,
        read_at=timezone.now(),
    )
    return Response({'updated': updated})
