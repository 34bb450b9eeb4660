# bloodmatch/views.py
from django.conf import settings
from django.db import connection, DatabaseError
from django.utils import timezone
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response


@api_view(['GET'])
@permission_classes([AllowAny])
def health(request):
    """Liveness check with database status"""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
        db_status = 'connected'
    except DatabaseError:
        db_status = 'disconnected'

    return Response({
        'status': 'OK',
        'message': 'Blood Donation API is running',
        'timestamp': timezone.now().isoformat(),
        'database': db_status,
        'debug': settings.DEBUG,
    })
