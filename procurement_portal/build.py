#!/usr/bin/env python3
"""
Database build for the Procurement Portal
Creates tables, guarantees the admin principal, optionally seeds debug data
"""

from flask import current_app
from procurement_portal import db
from procurement_portal.logger import get_logger

logger = get_logger("procurement_portal.build")


def verify_critical_data():
    """
    Verify that critical data is present in the database

    Returns:
        bool: True if all critical data is present, False otherwise
    """
    from procurement_portal.data.core.user_info.user import User

    admin_user = User.query.filter_by(username=current_app.config['ADMIN_USERNAME']).first()
    if not admin_user:
        logger.warning("Admin user not found")
        return False

    logger.info("Critical data verification passed")
    return True


def insert_critical_data():
    """
    Insert critical data that must always be present: the admin user that
    operators issue API tokens for.

    Raises:
        RuntimeError: ADMIN_PASSWORD is not configured and the admin is missing
    """
    from procurement_portal.data.core.user_info.user import User

    if verify_critical_data():
        logger.info("Critical data already present, skipping insertion")
        return

    password = current_app.config.get('ADMIN_PASSWORD')
    if not password:
        error_msg = "ADMIN_PASSWORD not set; cannot create the admin user (run generate_env.py)"
        logger.error(error_msg)
        raise RuntimeError(error_msg)

    try:
        admin = User(
            username=current_app.config['ADMIN_USERNAME'],
            email=current_app.config['ADMIN_EMAIL'],
            is_active=True,
        )
        admin.set_password(password)
        db.session.add(admin)
        db.session.commit()
        logger.info(f"Inserted admin user: {admin.username}")
    except Exception as e:
        db.session.rollback()
        logger.error(f"Critical data insertion failed: {e}")
        raise


def build_database(enable_debug_data=True):
    """
    Main build orchestrator. Runs inside the current application context.

    Args:
        enable_debug_data (bool): Whether to insert debug data
            Note: Critical data is ALWAYS checked and inserted regardless of flags
    """
    logger.info(f"Starting database build - debug data: {enable_debug_data}")

    db.create_all()
    logger.info("All database tables created")

    insert_critical_data()

    if enable_debug_data:
        from procurement_portal.data.core.user_info.user import User
        from procurement_portal.debug.debug_data_manager import insert_debug_data

        admin = User.query.filter_by(username=current_app.config['ADMIN_USERNAME']).first()
        logger.info("Inserting debug data...")
        insert_debug_data(user_id=admin.id)

    logger.info("Database build completed successfully")
