"""create investment schema

Revision ID: 5b2e9d41c7a3
Revises:
Create Date: 2025-10-02 18:20:41.512093

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from invest_tracker.models.beneficiary import SHARE_TRIGGER_DDL


# revision identifiers, used by Alembic.
revision: str = '5b2e9d41c7a3'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

risk_level = sa.Enum('Low', 'Medium', 'High', name='risklevel')
transaction_type = sa.Enum('BUY', 'SELL', name='transactiontype')


def upgrade() -> None:
    """Upgrade schema: create every table and the beneficiary share trigger."""
    op.create_table(
        'UserProfile',
        sa.Column('User_ID', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('Name', sa.String(length=100), nullable=False),
        sa.Column('Email', sa.String(length=120), nullable=False, unique=True),
        sa.Column('Phone_No', sa.String(length=20), nullable=True),
        sa.Column('Address', sa.String(length=255), nullable=True),
        sa.Column('Age', sa.Integer(), nullable=True),
        sa.Column('Investment_Goals', sa.String(length=255), nullable=True),
        sa.Column('Risk_Appetite', risk_level, nullable=False),
    )
    op.create_table(
        'Asset',
        sa.Column('Asset_ID', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('Asset_Name', sa.String(length=100), nullable=False),
        sa.Column('Asset_Type', sa.String(length=50), nullable=True),
        sa.Column('Ticker_Symbol', sa.String(length=20), nullable=True),
        sa.Column('Sector', sa.String(length=50), nullable=True),
        sa.Column('Market_Price', sa.Float(), nullable=False, server_default='0'),
        sa.Column('Risk_Rating', sa.Float(), nullable=True),
    )
    op.create_index('ix_Asset_Sector', 'Asset', ['Sector'])
    op.create_table(
        'Portfolio',
        sa.Column('Portfolio_ID', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('User_ID', sa.Integer(), sa.ForeignKey('UserProfile.User_ID'), nullable=False),
        sa.Column('Portfolio_Name', sa.String(length=100), nullable=False),
        sa.Column('Portfolio_Type', sa.String(length=50), nullable=True),
        sa.Column('Creation_Date', sa.Date(), nullable=True),
        sa.Column('Risk_Level', risk_level, nullable=False),
        sa.Column('Strategy', sa.String(length=100), nullable=True),
        sa.Column('Current_Value', sa.Float(), nullable=False, server_default='0'),
    )
    op.create_index('ix_Portfolio_User_ID', 'Portfolio', ['User_ID'])
    op.create_table(
        'Holds',
        sa.Column('Portfolio_ID', sa.Integer(), sa.ForeignKey('Portfolio.Portfolio_ID'), primary_key=True),
        sa.Column('Asset_ID', sa.Integer(), sa.ForeignKey('Asset.Asset_ID'), primary_key=True),
        sa.Column('Units_Held', sa.Float(), nullable=False, server_default='0'),
    )
    op.create_table(
        'Transaction',
        sa.Column('Transaction_ID', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('Portfolio_ID', sa.Integer(), sa.ForeignKey('Portfolio.Portfolio_ID'), nullable=False),
        sa.Column('Asset_ID', sa.Integer(), sa.ForeignKey('Asset.Asset_ID'), nullable=False),
        sa.Column('Transaction_Type', transaction_type, nullable=False),
        sa.Column('Quantity', sa.Float(), nullable=False),
        sa.Column('Price_Per_Unit', sa.Float(), nullable=False),
        sa.Column('Amount', sa.Float(), nullable=False),
        sa.Column('Transaction_Date', sa.Date(), nullable=False),
    )
    op.create_index('ix_Transaction_Portfolio_ID', 'Transaction', ['Portfolio_ID'])
    op.create_index('ix_Transaction_Asset_ID', 'Transaction', ['Asset_ID'])
    op.create_table(
        'Beneficiary',
        sa.Column('Beneficiary_ID', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('User_ID', sa.Integer(), sa.ForeignKey('UserProfile.User_ID'), nullable=False),
        sa.Column('Name', sa.String(length=100), nullable=False),
        sa.Column('Relationship', sa.String(length=50), nullable=True),
        sa.Column('Share_Per', sa.Float(), nullable=False),
    )
    op.create_index('ix_Beneficiary_User_ID', 'Beneficiary', ['User_ID'])
    op.create_table(
        'PortfolioDashboard',
        sa.Column('Portfolio_ID', sa.Integer(), sa.ForeignKey('Portfolio.Portfolio_ID'), primary_key=True),
        sa.Column('Total_Investment', sa.Float(), nullable=False, server_default='0'),
        sa.Column('Current_Value', sa.Float(), nullable=False, server_default='0'),
        sa.Column('ROI', sa.Float(), nullable=False, server_default='0'),
        sa.Column('Beta', sa.Float(), nullable=True),
        sa.Column('Alpha', sa.Float(), nullable=True),
        sa.Column('Generated_At', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_table(
        'Query',
        sa.Column('Query_ID', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('Query_Name', sa.String(length=100), nullable=False, unique=True),
        sa.Column('Query_Type', sa.String(length=50), nullable=False),
        sa.Column('Endpoint', sa.String(length=120), nullable=True),
        sa.Column('Description', sa.Text(), nullable=True),
    )

    trigger = SHARE_TRIGGER_DDL.get(op.get_context().dialect.name)
    if trigger:
        op.execute(trigger)


def downgrade() -> None:
    """Downgrade schema: drop every table (the trigger goes with Beneficiary)."""
    op.drop_table('Query')
    op.drop_table('PortfolioDashboard')
    op.drop_index('ix_Beneficiary_User_ID', table_name='Beneficiary')
    op.drop_table('Beneficiary')
    op.drop_index('ix_Transaction_Asset_ID', table_name='Transaction')
    op.drop_index('ix_Transaction_Portfolio_ID', table_name='Transaction')
    op.drop_table('Transaction')
    op.drop_table('Holds')
    op.drop_index('ix_Portfolio_User_ID', table_name='Portfolio')
    op.drop_table('Portfolio')
    op.drop_index('ix_Asset_Sector', table_name='Asset')
    op.drop_table('Asset')
    op.drop_table('UserProfile')
