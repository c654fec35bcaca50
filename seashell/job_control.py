"""
Signal handlers for the shell process.

reap_children runs asynchronously on SIGCHLD. It only calls waitpid and
must never touch history or other shell state, so this module does not
import anything from the rest of the package.
"""
import os
import signal


def reap_children(signum=None, frame=None):
    """Collect every terminated child without blocking"""
    while True:
        try:
            pid, _ = os.waitpid(-1, os.WNOHANG)
        except ChildProcessError:
            # no children at all
            break
        if pid == 0:
            # children exist but none has finished
            break


def handle_sigint(signum, frame):
    # Ctrl+C only moves to a new line, the shell keeps running.
    # Written straight to fd 1, never through sys.stdout
    os.write(1, b"\n")


def init_signal_handlers():
    """Install signal handlers, once at startup"""
    signal.signal(signal.SIGCHLD, reap_children)
    signal.signal(signal.SIGINT, handle_sigint)
