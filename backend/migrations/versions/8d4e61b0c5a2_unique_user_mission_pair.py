"""one acceptance row per user and mission

Revision ID: 8d4e61b0c5a2
Revises: 3f1a9c2e7b10
Create Date: 2025-03-09 18:30:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8d4e61b0c5a2'
down_revision: Union[str, None] = '3f1a9c2e7b10'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Keep the oldest row of any duplicated pair before adding the constraint
    op.execute(sa.text("""
        DELETE FROM user_missions
        WHERE id NOT IN (
            SELECT keep_id FROM (
                SELECT MIN(id) AS keep_id FROM user_missions GROUP BY user_id, mission_id
            ) AS keepers
        )
    """))
    with op.batch_alter_table('user_missions') as batch_op:
        batch_op.create_unique_constraint('uq_user_missions_user_mission', ['user_id', 'mission_id'])


def downgrade() -> None:
    with op.batch_alter_table('user_missions') as batch_op:
        batch_op.drop_constraint('uq_user_missions_user_mission', type_='unique')
