import sys
import warnings
import subprocess

import pfhardening.lib


def load_engine(engine):
    """ Load an engine """
    engine_name = "pfhardening.engines.%s.Engine" % engine
    try:
        return pfhardening.lib._load_class(engine_name)
    except ImportError:
        raise NotImplementedError("Engine %s is not implemented" % engine)


class BaseEngine(object):
    """Runs the commands of a firewall control utility.

    Subclasses yield the argument vectors; this class decides whether they
    are printed (dry run) or executed. Every failure is fatal except for
    enabling the packet filter, which commonly fails because it already is.
    """

    def __init__(self, hardening):
        self.hardening = hardening

    def apply_anchor_rules(self):
        self.__commit(self.anchor_load())

    def enable(self):
        self.__commit(self.engine_enable(), tolerate=True)

    def list_anchor_rules(self):
        self.__commit(self.anchor_show())

    def status(self):
        self.__commit(self.engine_status())

    def reload_config(self):
        self.__commit(self.config_reload())

    def __commit(self, cmds, tolerate=False):
        for cmd in cmds:
            if not self.hardening.dry_run:
                self.__commit_exec(cmd, tolerate)
            else:
                print(subprocess.list2cmdline(cmd))

    def __commit_exec(self, cmd, tolerate):
        """ Execute command """
        # pfctl writes to our stdout/stderr directly, keep program order
        sys.stdout.flush()
        sys.stderr.flush()
        try:
            returncode = subprocess.call(cmd)
        except OSError:
            returncode = None

        if returncode == 0:
            return
        if tolerate:
            # Attributed to the Hardening step, so each step warns on its own
            warnings.warn("Execution failed: " + str(cmd), stacklevel=4)
        else:
            raise pfhardening.lib.ExecutionFailed(cmd, returncode)

    def anchor_load(self):
        raise NotImplementedError("Function 'anchor_load' not implemented!")

    def engine_enable(self):
        raise NotImplementedError("Function 'engine_enable' not implemented!")

    def anchor_show(self):
        raise NotImplementedError("Function 'anchor_show' not implemented!")

    def engine_status(self):
        raise NotImplementedError("Function 'engine_status' not implemented!")

    def config_reload(self):
        raise NotImplementedError("Function 'config_reload' not implemented!")
