"""server_options.py"""
import sys

from appopts import App, BoolCell, IntCell, OptionType, StrCell
from appopts.prompt_utils import ask_secret
from appopts.utils import setup_logging

verbose = BoolCell()
port = IntCell(8080)
user = StrCell("admin")
password = StrCell()

app = App(description="Example server with a config file and a secret")
app.add("v", "verbose", OptionType.FLAG, verbose, "Chatty output")
app.add("p", "port", OptionType.INT, port, "Listen port")
app.add("u", "user", OptionType.STRING, user, "Admin user")
app.add(None, "password", OptionType.SECRET, password, "Admin password")
app.add_help()

if __name__ == "__main__":
    setup_logging(log_filename=None)
    if len(sys.argv) > 2 and sys.argv[1] == "--config":
        if not app.parse_file(sys.argv[2]):
            sys.exit(1)
        del sys.argv[1:3]
    if not app.parse_args(sys.argv):
        sys.exit(1)
    if not password.value:
        password.value = ask_secret(f"Password for {user.value}:")
    print(f"{app.program_name}: listening on {port.value} (verbose={verbose.value})")
