import shlex
import subprocess
from .errors import *
from .settings import *
from .utils import *

"""
Note: this function escapes an argument string
for Unix shell but surrounds it by single quotes.
It returns a single quoted string with the result.
Hence the surrounding quotes APPEAR escaped when
printing them.
"""
# Surrounds with SINGLE quotes.
def nix_arg_escape(arg):
    return shlex.quote(arg)

"""
Runs a shell command and returns its stdout as text.

A timeout isn't treated as an error. It's logged and the
output is empty so callers see it as 'nothing found.'
A command that can't start or exits with an error code
raises ErrorCmdFailed as there's no way to recover.
"""
def cmd(value, timeout=CMD_TIMEOUT):
    try:
        proc = subprocess.run(
            value,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            shell=True,
            timeout=timeout
        )
    except subprocess.TimeoutExpired:
        log(f"command {value} timed out")
        return ""
    except OSError as e:
        raise ErrorCmdFailed(f"cmd {value} could not run: {e}")

    # Log any visible errors.
    stderr = proc.stderr
    if stderr is not None and len(stderr):
        log(f"cmd {value} stderr = {stderr}")

    if proc.returncode != 0:
        raise ErrorCmdFailed(
            f"cmd {value} exited with {proc.returncode}"
        )

    # Return command output.
    if proc.stdout is None:
        return ""
    else:
        return to_s(proc.stdout)
