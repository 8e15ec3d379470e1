import os
import shutil

from pfhardening import constants, lib


class AnchorFiles(object):

    """Handle on the files the hardening touches: the main pf config, the
    anchor rule file and the one-time backup of the main config"""

    def __init__(
        self,
        pf_conf: str = constants.PF_CONF,
        anchor_file: str = constants.ANCHOR_FILE,
        backup_file: str = constants.BACKUP_FILE,
        anchor_name: str = constants.ANCHOR_NAME,
    ) -> None:
        self.pf_conf = pf_conf
        self.anchor_file = anchor_file
        self.backup_file = backup_file
        self.anchor_name = anchor_name

    @property
    def edit_backup_file(self) -> str:
        """Copy taken right before the main config is rewritten"""
        return self.pf_conf + constants.EDIT_BACKUP_SUFFIX

    #
    # Main configuration
    #
    def read_conf(self) -> str:
        with open(self.pf_conf, newline="") as conf:
            return conf.read()

    def write_conf(self, content: str) -> None:
        with open(self.pf_conf, "w", newline="") as conf:
            conf.write(content)

    def conf_has_anchor(self) -> bool:
        """ Is the anchor referenced from the main config? """
        try:
            content = self.read_conf()
        except FileNotFoundError:
            return False
        return lib.anchor_reference(self.anchor_name) in content

    def append_include(self) -> None:
        """ Append the include block, starting on a fresh line """
        with open(self.pf_conf, "a+", newline="") as conf:
            conf.seek(0)
            content = conf.read()
            if content and not content.endswith("\n"):
                conf.write("\n")
            conf.write(lib.include_block(self.anchor_name, self.anchor_file))

    def remove_include(self) -> None:
        """ Strip the include block, keeping a copy of the previous content """
        shutil.copyfile(self.pf_conf, self.edit_backup_file)
        content = self.read_conf()
        self.write_conf(
            lib.remove_matching_lines(content, lib.include_patterns(self.anchor_name))
        )

    #
    # Backup
    #
    def backup_exists(self) -> bool:
        return os.path.isfile(self.backup_file)

    def create_backup(self) -> None:
        shutil.copyfile(self.pf_conf, self.backup_file)

    #
    # Anchor rule file
    #
    def anchor_exists(self) -> bool:
        return os.path.isfile(self.anchor_file)

    def write_anchor(self, ruleset: str) -> None:
        directory = os.path.dirname(self.anchor_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.anchor_file, "w", newline="") as anchor:
            anchor.write(ruleset)

    def remove_anchor(self) -> None:
        os.remove(self.anchor_file)

    def __repr__(self) -> str:
        myvars = vars(self)
        myrepr = ", ".join("%s=%s" % (var, myvars[var]) for var in myvars)
        return "<AnchorFiles(%s)>" % myrepr
