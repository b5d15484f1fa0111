"""SQLAlchemy table definitions for the WordPress schema.

Only the tables and columns the portal touches are declared. The schema
itself is owned and migrated by WordPress.
"""

from sqlalchemy import (
    BigInteger,
    Column,
    DateTime,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "wp_users",
    metadata,
    Column("ID", BigInteger, primary_key=True, autoincrement=True),
    Column("user_login", String(60), nullable=False, server_default=""),
    Column("user_email", String(100), nullable=False, server_default=""),
    Column("display_name", String(250), nullable=False, server_default=""),
)

# ============================================================================
# POSTS TABLE (articles, attachments, pages, revisions...)
# ============================================================================
posts_table = Table(
    "wp_posts",
    metadata,
    Column("ID", BigInteger, primary_key=True, autoincrement=True),
    Column("post_author", BigInteger, nullable=False, server_default="0"),
    Column("post_date", DateTime, nullable=True),
    Column("post_date_gmt", DateTime, nullable=True),
    Column("post_content", Text, nullable=False, server_default=""),
    Column("post_title", Text, nullable=False, server_default=""),
    Column("post_excerpt", Text, nullable=False, server_default=""),
    Column("post_status", String(20), nullable=False, server_default="publish"),
    Column("post_name", String(200), nullable=False, server_default=""),
    Column("post_type", String(20), nullable=False, server_default="post"),
    Column("guid", String(255), nullable=False, server_default=""),
    Column("comment_count", BigInteger, nullable=False, server_default="0"),
)

Index(
    "idx_wp_posts_type_status_date",
    posts_table.c.post_type,
    posts_table.c.post_status,
    posts_table.c.post_date,
    posts_table.c.ID,
)
Index("idx_wp_posts_post_name", posts_table.c.post_name)

# ============================================================================
# POSTMETA TABLE (featured image lookup)
# ============================================================================
postmeta_table = Table(
    "wp_postmeta",
    metadata,
    Column("meta_id", BigInteger, primary_key=True, autoincrement=True),
    Column("post_id", BigInteger, nullable=False, server_default="0"),
    Column("meta_key", String(255), nullable=True),
    Column("meta_value", Text, nullable=True),
)

Index("idx_wp_postmeta_post_id", postmeta_table.c.post_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "wp_comments",
    metadata,
    Column("comment_ID", BigInteger, primary_key=True, autoincrement=True),
    Column("comment_post_ID", BigInteger, nullable=False, server_default="0"),
    Column("comment_author", Text, nullable=False),
    Column("comment_author_email", String(100), nullable=False, server_default=""),
    Column("comment_author_url", String(200), nullable=False, server_default=""),
    Column("comment_author_IP", String(100), nullable=False, server_default=""),
    Column("comment_date", DateTime, nullable=False),
    Column("comment_date_gmt", DateTime, nullable=False),
    Column("comment_content", Text, nullable=False),
    Column("comment_karma", Integer, nullable=False, server_default="0"),
    Column("comment_approved", String(20), nullable=False, server_default="1"),
    Column("comment_agent", String(255), nullable=False, server_default=""),
    Column("comment_type", String(20), nullable=False, server_default="comment"),
    Column("comment_parent", BigInteger, nullable=False, server_default="0"),
    Column("user_id", BigInteger, nullable=False, server_default="0"),
)

Index("idx_wp_comments_post_id", comments_table.c.comment_post_ID)
Index(
    "idx_wp_comments_approved_date_gmt",
    comments_table.c.comment_approved,
    comments_table.c.comment_date_gmt,
)
Index("idx_wp_comments_parent", comments_table.c.comment_parent)
