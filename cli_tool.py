import subprocess
import sys
import os

def resource_path(relative_path):
    """Get absolute path to resource (for dev and for PyInstaller onefile)."""
    try:
        base_path = sys._MEIPASS
    except AttributeError:
        base_path = os.path.dirname(os.path.abspath(__file__))
    return os.path.join(base_path, relative_path)

# MENU LIST

SCRIPTS = {
    "1": ("Script 1 - Split CSV File", "split_single_csv.py"),
    "2": ("Script 2 - Split CSV Folder", "split_csv_folder.py"),
}

def display_menu():
    print("\n=== CSV Splitter CLI Tool ===\n")
    for key, (desc, _) in SCRIPTS.items():
        print(f"{key}. {desc}")
    print("q. Quit")

def get_user_choice():
    while True:
        display_menu()
        choice = input(f"\nSelect a script to run (1–{len(SCRIPTS)}): ").strip().lower()
        if choice == 'q':
            print("Exiting.\n")
            return None
        if choice in SCRIPTS:
            return SCRIPTS[choice]
        print("\nInvalid choice. Please try again.")

def prompt_post_script():
    while True:
        user_input = input("Press r to return to menu, or q to quit: ").strip().lower()
        if user_input == 'r':
            return True  # go back to menu
        elif user_input == 'q':
            print("Exiting.\n")
            return False
        else:
            print("Invalid input. Please enter r or q.")

def run_script(script_path):
    process = subprocess.Popen([sys.executable, script_path])
    try:
        while True:
            try:
                return process.wait(timeout=0.5)
            except subprocess.TimeoutExpired:
                continue
    except KeyboardInterrupt:
        print("User interrupted. Terminating the running script...")
        if process.poll() is None:
            process.terminate()
            try:
                process.wait(timeout=3)
            except subprocess.TimeoutExpired:
                process.kill()
        return None

# ---- Main ----

def main():
    while True:
        result = get_user_choice()
        if result is None:
            break

        desc, script_rel_path = result
        script_path = resource_path(script_rel_path)

        if not os.path.exists(script_path):
            print(f"Script not found: {script_path}")
            continue

        print(f"\nRunning: {desc}")
        returncode = run_script(script_path)
        if returncode:
            print(f"Script exited with status {returncode}.")

        # after script ends
        if not prompt_post_script():
            break

if __name__ == "__main__":
    main()
