import logging
import os
import sys

logger = logging.getLogger(__name__)

# Exit status of a child whose exec failed
EXIT_NOT_FOUND = 127


def exec_child(args):
    """
    Replace the child process image with args[0].
    Never returns: on failure reports and exits the child.
    """
    try:
        os.execvp(args[0], args)
    except (OSError, ValueError):
        print(f"{args[0]}: command not found", flush=True)
    finally:
        os._exit(EXIT_NOT_FOUND)


def run_external(args, background=False):
    """
    Run an external command in a child process.
    Returns: exit code of a foreground command, None for background
    commands or when the status is no longer available.

    The foreground status is best-effort: if reap_children collects the
    child before waitpid does (a background child ending during the wait
    delivers SIGCHLD), the status is gone and None is returned.
    """
    # Anything still buffered would be written twice once the child flushes
    sys.stdout.flush()
    sys.stderr.flush()

    try:
        pid = os.fork()
    except OSError as e:
        print(f"seashell: fork failed: {e.strerror or e}", file=sys.stderr)
        return None

    if pid == 0:
        exec_child(args)

    # Background: reap_children picks it up when it ends
    if background:
        logger.debug("started [%d] in background: %s", pid, " ".join(args))
        return None

    # Foreground: wait for this child only
    try:
        _, status = os.waitpid(pid, 0)
    except ChildProcessError:
        # reap_children got to it first
        logger.debug("[%d] already reaped", pid)
        return None

    exit_code = os.waitstatus_to_exitcode(status)
    logger.debug("[%d] exited with code %d", pid, exit_code)
    return exit_code
