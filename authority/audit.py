"""
Structured audit events.

Permission denials and depth chart edits are emitted on the
``sideline.audit`` logger as JSON lines and, where a team is known, persisted
as AuditLog rows.
"""

import logging

from .models import AuditLog

logger = logging.getLogger('sideline.audit')


def log_permission_denial(reason, **context):
    logger.warning(reason, extra={'context': {'event': 'permission_denial', 'reason': reason, **context}})


def log_depth_chart_edit(**context):
    logger.info('depth chart updated', extra={'context': {'event': 'depth_chart_edit', **context}})


def record(team, actor, action, **metadata):
    return AuditLog.objects.create(team=team, actor=actor, action=action, metadata=metadata)
