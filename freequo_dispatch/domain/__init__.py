"""Domain layer - Pure business logic.

Entities, value objects, protocols (ports) and domain events of the
side-effect dispatcher. The domain layer has NO dependencies on any
framework or infrastructure.

Structure:
- entities/: SideEffectAttempt, StatusRecord
- value_objects/: ApplicationNotice, PaymentOrder, RenderedMessage, PaymentResult, ...
- protocols/: Ports for the record store, mail transport, payment channel, logging, events
- events/: Trigger events and dispatch observability events
"""
