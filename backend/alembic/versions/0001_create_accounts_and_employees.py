"""create accounts and employees tables"""
from alembic import op
import sqlalchemy as sa

revision = "0001_accounts_employees"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "accounts",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("username", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("password_hash", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_accounts_username", "accounts", ["username"], unique=True)
    op.create_index("ix_accounts_email", "accounts", ["email"], unique=True)

    op.create_table(
        "employees",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("first_name", sa.String(), nullable=False),
        sa.Column("last_name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("gender", sa.String(16), nullable=False),
        sa.Column("designation", sa.String(), nullable=False),
        sa.Column("salary", sa.Float(), nullable=False),
        sa.Column("date_of_joining", sa.Date(), nullable=False),
        sa.Column("department", sa.String(), nullable=False),
        sa.Column("employee_photo", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("salary >= 1000", name="ck_employees_salary_minimum"),
        sa.CheckConstraint(
            "gender IN ('Male', 'Female', 'Other')", name="ck_employees_gender_allowed"
        ),
    )
    op.create_index("ix_employees_email", "employees", ["email"], unique=True)
    op.create_index("ix_employees_designation", "employees", ["designation"])
    op.create_index("ix_employees_department", "employees", ["department"])


def downgrade() -> None:
    op.drop_index("ix_employees_department", table_name="employees")
    op.drop_index("ix_employees_designation", table_name="employees")
    op.drop_index("ix_employees_email", table_name="employees")
    op.drop_table("employees")
    op.drop_index("ix_accounts_email", table_name="accounts")
    op.drop_index("ix_accounts_username", table_name="accounts")
    op.drop_table("accounts")
