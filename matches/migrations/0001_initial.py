import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('requesters', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Match',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('donor_name', models.CharField(max_length=150)),
                ('requester_name', models.CharField(max_length=150)),
                ('blood_type', models.CharField(max_length=3)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('donor_accepted', 'Donor Accepted'), ('requester_accepted', 'Requester Accepted'), ('both_accepted', 'Both Accepted'), ('donor_rejected', 'Donor Rejected'), ('requester_rejected', 'Requester Rejected'), ('expired', 'Expired')], default='pending', max_length=20)),
                ('donor_response', models.CharField(choices=[('pending', 'Pending'), ('accepted', 'Accepted'), ('rejected', 'Rejected')], default='pending', max_length=10)),
                ('requester_response', models.CharField(choices=[('pending', 'Pending'), ('accepted', 'Accepted'), ('rejected', 'Rejected')], default='pending', max_length=10)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('expires_at', models.DateTimeField()),
                ('donor_responded_at', models.DateTimeField(blank=True, null=True)),
                ('requester_responded_at', models.DateTimeField(blank=True, null=True)),
                ('donor_info', models.JSONField(blank=True, default=dict)),
                ('requester_info', models.JSONField(blank=True, default=dict)),
                ('donor', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='donor_matches', to=settings.AUTH_USER_MODEL)),
                ('request', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='matches', to='requesters.bloodrequest')),
                ('requester', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='requester_matches', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name_plural': 'Matches',
                'ordering': ['-created_at', '-id'],
                'indexes': [
                    models.Index(fields=['status', 'expires_at'], name='matches_mat_status_2b9f41_idx'),
                    models.Index(fields=['request', 'status'], name='matches_mat_request_7d3a52_idx'),
                    models.Index(fields=['donor', 'status'], name='matches_mat_donor_i_91c6e0_idx'),
                    models.Index(fields=['requester', 'status'], name='matches_mat_request_e40b18_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(condition=models.Q(('status__in', ['pending', 'donor_accepted', 'requester_accepted', 'both_accepted'])), fields=('donor', 'request'), name='unique_active_match_per_donor_request'),
                ],
            },
        ),
    ]
