"""Mail transport implementations.

- StubMailTransport: logs and keeps messages in memory (development/testing)
- SesMailTransport: AWS SES (production)
"""

from freequo_dispatch.infrastructure.email.ses_mail_transport import SesMailTransport
from freequo_dispatch.infrastructure.email.stub_mail_transport import (
    StubMailTransport,
)

__all__ = ["SesMailTransport", "StubMailTransport"]
