"""
Central Signal Registry for Event-Driven Architecture.

Uses blinker namespaces so the content store and the learner engine can
announce changes without knowing who listens.

Usage:
    # Publisher (sender)
    from cyberlearn_app.core.signals import content_created
    content_created.send(None, content_type='lesson', content_id=3, title='...')

    # Subscriber (receiver)
    @content_created.connect
    def on_content_created(sender, **kwargs):
        ...
"""
from blinker import Namespace

# ============================================
# Content Management Signals
# ============================================
content_signals = Namespace()

# Signal: Fired after a lesson or question row is committed
# Payload: content_type ('lesson' | 'question'), content_id, title
content_created = content_signals.signal('content_created')

# Signal: Fired after a lesson or question row is deleted
# Payload: content_type, content_id
content_deleted = content_signals.signal('content_deleted')

# ============================================
# Learner Signals
# ============================================
learner_signals = Namespace()

# Signal: Fired when a quiz reaches its results screen
# Payload: title, score, question_count, percentage, tier
quiz_completed = learner_signals.signal('quiz_completed')

# Signal: Fired when the learner moves past the last step of the course
# Payload: total_items, lesson_count, quiz_count
course_completed = learner_signals.signal('course_completed')
