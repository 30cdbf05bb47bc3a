"""create_source_record_tables

Revision ID: 7c1e4b2a9f30
Revises:
Create Date: 2026-10-19 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "7c1e4b2a9f30"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _base_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def _status_columns() -> list[sa.Column]:
    return [
        sa.Column(
            "side_effect_sent",
            sa.Boolean(),
            server_default=sa.false(),
            nullable=False,
            comment="Idempotency flag; status updates require it to be false",
        ),
        sa.Column("side_effect_sent_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("side_effect_reference", sa.String(length=255), nullable=True),
        sa.Column("side_effect_error", sa.Text(), nullable=True),
        sa.Column("side_effect_error_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "side_effect_simulated",
            sa.Boolean(),
            server_default=sa.false(),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Create job_applications and payment_orders tables."""
    op.create_table(
        "job_applications",
        *_base_columns(),
        sa.Column("freelancer_email", sa.String(length=255), nullable=True),
        sa.Column("freelancer_name", sa.String(length=255), nullable=True),
        sa.Column("job_id", sa.String(length=64), nullable=True),
        sa.Column("job_name", sa.String(length=255), nullable=True),
        sa.Column("salary", sa.String(length=64), nullable=True),
        sa.Column("duration", sa.String(length=64), nullable=True),
        sa.Column("applied_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("data", sa.JSON(), nullable=False),
        *_status_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_job_applications_job_id"), "job_applications", ["job_id"]
    )

    op.create_table(
        "payment_orders",
        *_base_columns(),
        sa.Column(
            "job_id",
            sa.String(length=64),
            nullable=True,
            comment="Job the payment funds",
        ),
        sa.Column(
            "amount",
            sa.BigInteger(),
            nullable=False,
            comment="Amount in minor units",
        ),
        sa.Column("currency", sa.String(length=3), nullable=False),
        sa.Column("milestone", sa.String(length=255), nullable=True),
        sa.Column("job_title", sa.String(length=255), nullable=True),
        sa.Column("freelancer_name", sa.String(length=255), nullable=True),
        sa.Column("receipt", sa.String(length=128), nullable=False),
        sa.Column("is_mock", sa.Boolean(), nullable=False),
        *_status_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_payment_orders_job_id"), "payment_orders", ["job_id"])


def downgrade() -> None:
    """Drop job_applications and payment_orders tables."""
    op.drop_index(op.f("ix_payment_orders_job_id"), table_name="payment_orders")
    op.drop_table("payment_orders")
    op.drop_index(op.f("ix_job_applications_job_id"), table_name="job_applications")
    op.drop_table("job_applications")
