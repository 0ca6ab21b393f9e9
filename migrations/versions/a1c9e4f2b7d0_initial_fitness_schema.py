"""initial fitness schema

Revision ID: a1c9e4f2b7d0
Revises: 
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = 'a1c9e4f2b7d0'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    conn = op.get_bind()
    insp = sa.inspect(conn)

    if not insp.has_table('users'):
        op.create_table(
            'users',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('name', sa.String(length=100), nullable=True),
            sa.Column('email', sa.String(length=120), nullable=False),
            sa.Column('password', sa.String(length=255), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        )
        op.create_index('ix_users_email', 'users', ['email'], unique=True)

    if not insp.has_table('user_preferences'):
        op.create_table(
            'user_preferences',
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True),
            sa.Column('default_weight_unit', sa.String(length=10), nullable=False, server_default='kg'),
            sa.Column('default_water_unit', sa.String(length=10), nullable=False, server_default='ml'),
            sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )

    if not insp.has_table('foods'):
        op.create_table(
            'foods',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
            sa.Column('name', sa.String(length=200), nullable=False),
            sa.Column('brand', sa.String(length=200), nullable=True),
            sa.Column('barcode', sa.String(length=64), nullable=True),
            sa.Column('calories', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('protein', sa.Float(), nullable=True),
            sa.Column('carbs', sa.Float(), nullable=True),
            sa.Column('fat', sa.Float(), nullable=True),
            sa.Column('serving_size', sa.String(length=50), nullable=True),
            sa.Column('serving_unit', sa.String(length=50), nullable=True),
            sa.Column('source', sa.String(length=20), nullable=False, server_default='manual'),
            sa.Column('is_compound', sa.Boolean(), nullable=False, server_default=sa.text('0')),
            sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
            sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        )
        op.create_index('ix_foods_user_id', 'foods', ['user_id'])
        op.create_index('ix_foods_barcode', 'foods', ['barcode'])

    if not insp.has_table('compound_foods'):
        op.create_table(
            'compound_foods',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
            sa.Column('food_id', sa.Integer(), sa.ForeignKey('foods.id', ondelete='SET NULL'), nullable=True, unique=True),
            sa.Column('name', sa.String(length=200), nullable=False),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('servings', sa.Float(), nullable=False, server_default='1'),
            sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
            sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        )
        op.create_index('ix_compound_foods_user_id', 'compound_foods', ['user_id'])

    if not insp.has_table('compound_food_ingredients'):
        op.create_table(
            'compound_food_ingredients',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('compound_food_id', sa.Integer(), sa.ForeignKey('compound_foods.id', ondelete='CASCADE'), nullable=False),
            sa.Column('ingredient_food_id', sa.Integer(), sa.ForeignKey('foods.id'), nullable=False),
            sa.Column('quantity', sa.Float(), nullable=False, server_default='1'),
            sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        )
        op.create_index('ix_compound_food_ingredients_compound_food_id', 'compound_food_ingredients', ['compound_food_id'])

    if not insp.has_table('diet_entries'):
        op.create_table(
            'diet_entries',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
            sa.Column('food_id', sa.Integer(), sa.ForeignKey('foods.id', ondelete='CASCADE'), nullable=False),
            sa.Column('date', sa.Date(), nullable=False),
            sa.Column('meal_category', sa.String(length=20), nullable=False),
            sa.Column('servings', sa.Float(), nullable=False, server_default='1'),
            sa.Column('notes', sa.Text(), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        )
        op.create_index('ix_diet_entries_user_date', 'diet_entries', ['user_id', 'date'])

    if not insp.has_table('water_entries'):
        op.create_table(
            'water_entries',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
            sa.Column('date', sa.Date(), nullable=False),
            sa.Column('amount', sa.Float(), nullable=False),
            sa.Column('unit', sa.String(length=10), nullable=False, server_default='ml'),
            sa.Column('timestamp', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        )
        op.create_index('ix_water_entries_user_date', 'water_entries', ['user_id', 'date'])

    if not insp.has_table('user_water_goals'):
        op.create_table(
            'user_water_goals',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, unique=True),
            sa.Column('daily_goal', sa.Float(), nullable=False),
            sa.Column('unit', sa.String(length=10), nullable=False, server_default='ml'),
            sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        )

    if not insp.has_table('weights'):
        op.create_table(
            'weights',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
            sa.Column('date', sa.Date(), nullable=False),
            sa.Column('weight', sa.Float(), nullable=False),
            sa.Column('unit', sa.String(length=10), nullable=False, server_default='kg'),
            sa.Column('notes', sa.Text(), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        )
        op.create_index('ix_weights_user_date', 'weights', ['user_id', 'date'])

    if not insp.has_table('exercises'):
        op.create_table(
            'exercises',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
            sa.Column('name', sa.String(length=150), nullable=False),
            sa.Column('muscle_group', sa.String(length=255), nullable=False),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
            sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        )
        op.create_index('ix_exercises_user_id', 'exercises', ['user_id'])

    if not insp.has_table('workout_templates'):
        op.create_table(
            'workout_templates',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
            sa.Column('name', sa.String(length=150), nullable=False),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
            sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        )
        op.create_index('ix_workout_templates_user_id', 'workout_templates', ['user_id'])

    if not insp.has_table('template_exercises'):
        op.create_table(
            'template_exercises',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('template_id', sa.Integer(), sa.ForeignKey('workout_templates.id', ondelete='CASCADE'), nullable=False),
            sa.Column('exercise_id', sa.Integer(), sa.ForeignKey('exercises.id', ondelete='CASCADE'), nullable=False),
            sa.Column('order_index', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('sets', sa.Integer(), nullable=False, server_default='3'),
            sa.Column('reps', sa.Integer(), nullable=False, server_default='10'),
            sa.Column('notes', sa.Text(), nullable=True),
        )
        op.create_index('ix_template_exercises_template_id', 'template_exercises', ['template_id'])

    if not insp.has_table('workout_instances'):
        op.create_table(
            'workout_instances',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
            sa.Column('template_id', sa.Integer(), sa.ForeignKey('workout_templates.id', ondelete='SET NULL'), nullable=True),
            sa.Column('name', sa.String(length=150), nullable=False),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('scheduled_date', sa.Date(), nullable=False),
            sa.Column('status', sa.String(length=20), nullable=False, server_default='scheduled'),
            sa.Column('completed_date', sa.DateTime(), nullable=True),
            sa.Column('notes', sa.Text(), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
            sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        )
        op.create_index('ix_workout_instances_user_id', 'workout_instances', ['user_id'])
        op.create_index('ix_workout_instances_scheduled_date', 'workout_instances', ['scheduled_date'])

    if not insp.has_table('instance_exercises'):
        op.create_table(
            'instance_exercises',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('workout_instance_id', sa.Integer(), sa.ForeignKey('workout_instances.id', ondelete='CASCADE'), nullable=False),
            sa.Column('exercise_id', sa.Integer(), sa.ForeignKey('exercises.id', ondelete='SET NULL'), nullable=True),
            sa.Column('exercise_name', sa.String(length=150), nullable=False),
            sa.Column('muscle_group', sa.String(length=255), nullable=True),
            sa.Column('order_index', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('notes', sa.Text(), nullable=True),
        )
        op.create_index('ix_instance_exercises_workout_instance_id', 'instance_exercises', ['workout_instance_id'])

    if not insp.has_table('exercise_sets'):
        op.create_table(
            'exercise_sets',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('instance_exercise_id', sa.Integer(), sa.ForeignKey('instance_exercises.id', ondelete='CASCADE'), nullable=False),
            sa.Column('set_number', sa.Integer(), nullable=False),
            sa.Column('target_reps', sa.Integer(), nullable=False),
            sa.Column('actual_reps', sa.Integer(), nullable=True),
            sa.Column('weight', sa.Float(), nullable=True),
            sa.Column('unit', sa.String(length=10), nullable=False, server_default='kg'),
            sa.Column('completed', sa.Boolean(), nullable=False, server_default=sa.text('0')),
        )
        op.create_index('ix_exercise_sets_instance_exercise_id', 'exercise_sets', ['instance_exercise_id'])


def downgrade():
    for table in [
        'exercise_sets',
        'instance_exercises',
        'workout_instances',
        'template_exercises',
        'workout_templates',
        'exercises',
        'weights',
        'user_water_goals',
        'water_entries',
        'diet_entries',
        'compound_food_ingredients',
        'compound_foods',
        'foods',
        'user_preferences',
        'users',
    ]:
        op.drop_table(table)
