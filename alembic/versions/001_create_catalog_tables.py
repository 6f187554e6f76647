"""Create catalog tables

Revision ID: 001_create_catalog_tables
Revises:
Create Date: 2026-10-18 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '001_create_catalog_tables'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table('products',
    sa.Column('id', sa.String(length=36), nullable=False),
    sa.Column('seo_title', sa.String(length=255), nullable=False),
    sa.Column('meta_description', sa.Text(), nullable=False),
    sa.Column('keywords', sa.JSON(), nullable=False),
    sa.Column('short_description', sa.Text(), nullable=False),
    sa.Column('html_content', sa.Text(), nullable=False),
    sa.Column('images', sa.JSON(), nullable=False),
    sa.Column('price', sa.Integer(), nullable=True),
    sa.Column('price_reference', sa.JSON(), nullable=True),
    sa.Column('raw_categories', sa.JSON(), nullable=False),
    sa.Column('woo_id', sa.Integer(), nullable=True),
    sa.Column('preview_url', sa.String(length=500), nullable=True),
    sa.Column('status', sa.String(length=20), nullable=False, comment='draft, processing, success, failed'),
    sa.Column('error_message', sa.Text(), nullable=True),
    sa.Column('made_by_process_id', sa.String(length=36), nullable=True),
    sa.Column('process_id', sa.String(length=36), nullable=True),
    sa.Column('workflow_id', sa.String(length=36), nullable=True),
    sa.Column('has_confirmed', sa.Boolean(), nullable=False),
    sa.Column('process_at', sa.DateTime(), nullable=True),
    sa.Column('finished_at', sa.DateTime(), nullable=True),
    sa.Column('created_at', sa.DateTime(), server_default=sa.text('now()'), nullable=False),
    sa.Column('updated_at', sa.DateTime(), server_default=sa.text('now()'), nullable=False),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_products_status'), 'products', ['status'], unique=False)
    op.create_index(op.f('ix_products_woo_id'), 'products', ['woo_id'], unique=False)

    op.create_table('posts',
    sa.Column('id', sa.String(length=36), nullable=False),
    sa.Column('wordpress_id', sa.BigInteger(), nullable=False),
    sa.Column('title', sa.Text(), nullable=False),
    sa.Column('slug', sa.String(length=255), nullable=False),
    sa.Column('content', sa.Text(), nullable=False),
    sa.Column('excerpt', sa.Text(), nullable=True),
    sa.Column('featured_image_url', sa.Text(), nullable=True),
    sa.Column('featured_image_alt', sa.Text(), nullable=True),
    sa.Column('status', sa.String(length=20), nullable=False),
    sa.Column('wordpress_url', sa.Text(), nullable=True),
    sa.Column('wordpress_date', sa.DateTime(), nullable=True),
    sa.Column('wordpress_modified', sa.DateTime(), nullable=True),
    sa.Column('last_synced_at', sa.DateTime(), nullable=True),
    sa.Column('author_id', sa.BigInteger(), nullable=True),
    sa.Column('author_name', sa.String(length=255), nullable=True),
    sa.Column('seo_title', sa.Text(), nullable=True),
    sa.Column('seo_description', sa.Text(), nullable=True),
    sa.Column('seo_focus_keyword', sa.String(length=255), nullable=True),
    sa.Column('main_keyword', sa.String(length=255), nullable=True),
    sa.Column('categories', sa.JSON(), nullable=False),
    sa.Column('tags', sa.JSON(), nullable=False),
    sa.Column('created_at', sa.DateTime(), server_default=sa.text('now()'), nullable=False),
    sa.Column('updated_at', sa.DateTime(), server_default=sa.text('now()'), nullable=False),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_posts_wordpress_id'), 'posts', ['wordpress_id'], unique=True)
    op.create_index(op.f('ix_posts_slug'), 'posts', ['slug'], unique=False)
    op.create_index(op.f('ix_posts_status'), 'posts', ['status'], unique=False)
    op.create_index(op.f('ix_posts_wordpress_date'), 'posts', ['wordpress_date'], unique=False)
    op.create_index(op.f('ix_posts_author_id'), 'posts', ['author_id'], unique=False)

    op.create_table('categories',
    sa.Column('id', sa.String(length=50), nullable=False),
    sa.Column('name', sa.String(length=255), nullable=False),
    sa.Column('slug', sa.String(length=255), nullable=False),
    sa.Column('updated_at', sa.DateTime(), server_default=sa.text('now()'), nullable=False),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_categories_name'), 'categories', ['name'], unique=False)

    op.create_table('product_brands',
    sa.Column('id', sa.String(length=50), nullable=False),
    sa.Column('name', sa.String(length=255), nullable=False),
    sa.Column('slug', sa.String(length=255), nullable=False),
    sa.Column('updated_at', sa.DateTime(), server_default=sa.text('now()'), nullable=False),
    sa.Column('created_at', sa.DateTime(), server_default=sa.text('now()'), nullable=False),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_product_brands_name'), 'product_brands', ['name'], unique=False)
    op.create_index(op.f('ix_product_brands_slug'), 'product_brands', ['slug'], unique=False)

    op.create_table('n8n_processes',
    sa.Column('id', sa.String(length=36), nullable=False),
    sa.Column('process_name', sa.String(length=255), nullable=False),
    sa.Column('n8n_workflow_id', sa.String(length=100), nullable=False),
    sa.Column('n8n_execution_id', sa.String(length=100), nullable=False),
    sa.Column('status', sa.String(length=20), nullable=False),
    sa.Column('error_message', sa.Text(), nullable=True),
    sa.Column('input_payload', sa.JSON(), nullable=True),
    sa.Column('output_payload', sa.JSON(), nullable=True),
    sa.Column('triggered_by', sa.String(length=36), nullable=True),
    sa.Column('started_at', sa.DateTime(), nullable=True),
    sa.Column('finished_at', sa.DateTime(), nullable=True),
    sa.Column('created_at', sa.DateTime(), server_default=sa.text('now()'), nullable=False),
    sa.Column('updated_at', sa.DateTime(), server_default=sa.text('now()'), nullable=False),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_n8n_processes_n8n_execution_id'), 'n8n_processes', ['n8n_execution_id'], unique=True)
    op.create_index(op.f('ix_n8n_processes_n8n_workflow_id'), 'n8n_processes', ['n8n_workflow_id'], unique=False)
    op.create_index(op.f('ix_n8n_processes_status'), 'n8n_processes', ['status'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_n8n_processes_status'), table_name='n8n_processes')
    op.drop_index(op.f('ix_n8n_processes_n8n_workflow_id'), table_name='n8n_processes')
    op.drop_index(op.f('ix_n8n_processes_n8n_execution_id'), table_name='n8n_processes')
    op.drop_table('n8n_processes')
    op.drop_index(op.f('ix_product_brands_slug'), table_name='product_brands')
    op.drop_index(op.f('ix_product_brands_name'), table_name='product_brands')
    op.drop_table('product_brands')
    op.drop_index(op.f('ix_categories_name'), table_name='categories')
    op.drop_table('categories')
    op.drop_index(op.f('ix_posts_author_id'), table_name='posts')
    op.drop_index(op.f('ix_posts_wordpress_date'), table_name='posts')
    op.drop_index(op.f('ix_posts_status'), table_name='posts')
    op.drop_index(op.f('ix_posts_slug'), table_name='posts')
    op.drop_index(op.f('ix_posts_wordpress_id'), table_name='posts')
    op.drop_table('posts')
    op.drop_table('products')
