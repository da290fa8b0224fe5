import sys
import subprocess
from getpass import getpass
from pathlib import Path

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def install_dependencies() -> bool:
    """
    Install project dependencies from requirements.txt.

    Returns:
        True if successful, False otherwise
    """
    print("Installing project dependencies...")

    requirements_file = PROJECT_ROOT / 'requirements.txt'
    if not requirements_file.exists():
        print(f"requirements.txt not found at {requirements_file}")
        return False

    try:
        subprocess.run(
            [sys.executable, '-m', 'pip', 'install', '-r', str(requirements_file)],
            check=True,
            capture_output=True
        )
        print("Project dependencies installed.")
        return True
    except subprocess.CalledProcessError as e:
        print(f"pip failed: {e}")
        return False


def setup_admin_password() -> bool:
    """
    Store the admin secret in the .env file.

    Returns:
        True if successful, False otherwise
    """
    # Import inside function to ensure dotenv is available after the dependency step
    from dotenv import dotenv_values, set_key
    from event_manager.core.config_manager import Config

    print("Admin Password Setup")

    if dotenv_values(Config.ENV_FILE).get("ADMIN_PASSWORD"):
        choice = input("An admin password is already set. Replace it? (y/N): ").lower()
        if choice != 'y':
            print("✓ Keeping existing admin password.")
            return True

    password = getpass("Choose an admin password: ")
    if not password or len(password) < 6:
        print("Password must be at least 6 characters.")
        return False
    if getpass("Repeat the admin password: ") != password:
        print("Passwords do not match.")
        return False

    try:
        Config.ENV_FILE.touch(exist_ok=True)
        set_key(str(Config.ENV_FILE), "ADMIN_PASSWORD", password)
        print("Admin password saved to .env")
        return True
    except OSError as e:
        print(f"Could not update .env: {e}")
        return False


def setup_timezone() -> None:
    """Optionally pin "today" to a timezone instead of the machine clock."""
    import pytz
    from dotenv import set_key
    from event_manager.core.config_manager import Config

    tz = input("Timezone for \"today\" views (blank = this computer's clock): ").strip()
    if not tz:
        print("Using the local clock.")
        return
    if tz not in pytz.all_timezones_set:
        print(f"Unknown timezone '{tz}', skipped.")
        return

    Config.ENV_FILE.touch(exist_ok=True)
    set_key(str(Config.ENV_FILE), "TIMEZONE", tz)
    print(f"Timezone set to {tz}")


def setup_data_directory() -> bool:
    """Create the directory that holds events.json."""
    from event_manager.core.config_manager import Config

    try:
        Config.EVENTS_FILE.parent.mkdir(parents=True, exist_ok=True)
        print(f"Events will be stored in {Config.EVENTS_FILE}")
        return True
    except OSError as e:
        print(f"Could not create data directory: {e}")
        return False


def main() -> None:
    """Main setup wizard."""
    print("Setting up Smart Event Manager...")
    print("="*60)

    # Step 1: Install dependencies
    print("\nStep 1: Installing Dependencies")
    if not install_dependencies():
        sys.exit(1)

    # Now we can import after installing dependencies
    try:
        from dotenv import dotenv_values
        from event_manager.core.config_manager import Config
        from event_manager.utils.logger import setup_logger

        logger = setup_logger(__name__)
        logger.info("Starting setup wizard")

    except ImportError as e:
        print(f"Failed to import required modules: {e}")
        print("Make sure all files are in the correct directories:")
        print("  - event_manager/core/config_manager.py")
        print("  - event_manager/utils/logger.py")
        sys.exit(1)

    # Step 2: Admin password
    print("\nStep 2: Admin Password")
    if not setup_admin_password():
        print("Admin password setup failed.")
        sys.exit(1)

    # Step 3: Timezone
    print("\nStep 3: Timezone")
    setup_timezone()

    # Step 4: Storage
    print("\nStep 4: Event Storage")
    if not setup_data_directory():
        sys.exit(1)

    # Final verification; Config was loaded before .env changed, so read the file again
    print("\nStep 5 Verification")
    if dotenv_values(Config.ENV_FILE).get("ADMIN_PASSWORD"):
        logger.info("Setup completed successfully")
        print("="*60)
        print("Setup complete!")
        print("="*60)
        print("\nYou can now run: python scripts/run.py")
    else:
        print("="*60)
        print("Setup completed with some warnings")
        print("="*60)
        print("\nPlease check the logs and fix any missing configuration")


if __name__ == '__main__':
    try:
        main()
    except KeyboardInterrupt:
        print("\nSetup cancelled.")
        sys.exit(1)
    except Exception as e:
        print(f"\nUnexpected error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)
