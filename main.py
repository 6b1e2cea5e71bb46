"""
Main entry point
Initializes the database, seeds departments and prints a clearance summary
"""

import sys

from nodues import create_app
from nodues.models.database import check_connection
from nodues.services import ClearanceService, DepartmentRegistry
from nodues.utils import log_info, log_error


def main():
    """Main application entry point"""
    print("=" * 50)
    print("🚀 Starting No-Dues clearance core")
    print("=" * 50)

    try:
        # Create the application (creates tables and seeds departments)
        app = create_app()

        with app.app_context():
            try:
                check_connection()
                log_info("✅ Database connection available")
            except Exception as e:
                log_error("❌ Database connection error", e)
                print(f"❌ Database connection error: {e}")
                return False

            keys = DepartmentRegistry.list_active_department_keys()
            print(f"🏢 Active departments: {', '.join(keys) or '(none)'}")

            summary = ClearanceService.summarize()
            print(f"📊 Requests: {summary['total']} total, {summary['pending']} pending, "
                  f"{summary['approved']} approved, {summary['rejected']} rejected")
            print(f"📜 Certificates issued: {summary['certificates_issued']}")

        return True

    except Exception as e:
        print(f"❌ Failed to start application: {e}")
        return False


if __name__ == '__main__':
    success = main()
    if not success:
        sys.exit(1)
