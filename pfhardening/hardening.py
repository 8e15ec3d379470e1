from typing import Any, Callable, Optional

from pfhardening import constants, engines
from pfhardening.files import AnchorFiles


class Hardening(object):

    """Installs, removes and detects the hardening anchor"""

    def __init__(
        self,
        files: Optional[AnchorFiles] = None,
        engine: str = constants.DEFAULT_ENGINE,
        dry_run: bool = False,
    ) -> None:
        self.files = files if files is not None else AnchorFiles()
        self.dry_run = dry_run
        self.engine = engines.load_engine(engine)(self)

    def is_installed(self) -> bool:
        """ Anchor referenced from the main config and anchor file present """
        return self.files.conf_has_anchor() and self.files.anchor_exists()

    def install(self) -> None:
        """Write the ruleset, wire the anchor into the main config and
        activate it"""
        files = self.files

        print("Creating custom pf ruleset in %s..." % files.anchor_file)
        self._change(
            "write %s" % files.anchor_file, files.write_anchor, constants.RULESET
        )

        if not files.backup_exists():
            print("Backing up %s to %s..." % (files.pf_conf, files.backup_file))
            self._change(
                "copy %s to %s" % (files.pf_conf, files.backup_file),
                files.create_backup,
            )

        if not files.conf_has_anchor():
            print("Adding custom anchor to %s..." % files.pf_conf)
            self._change("append anchor to %s" % files.pf_conf, files.append_include)
        else:
            print("Custom anchor is already present in %s." % files.pf_conf)

        print("Applying custom pf rules to the '%s' anchor..." % files.anchor_name)
        self.engine.apply_anchor_rules()
        self.engine.enable()

        print("Verifying active pf rules for '%s'..." % files.anchor_name)
        self.engine.list_anchor_rules()

        print("Checking pf status...")
        self.engine.status()

        print("macOS pf security hardening complete!")

    def uninstall(self) -> None:
        """Unwire the anchor, delete the anchor file and reload the main
        config. Safe to repeat."""
        files = self.files
        print("Uninstalling custom pf rules...")

        if files.conf_has_anchor():
            print("Removing custom anchor from %s..." % files.pf_conf)
            self._change(
                "remove anchor from %s (previous content kept in %s)"
                % (files.pf_conf, files.edit_backup_file),
                files.remove_include,
            )
            print("Removed custom anchor references from %s." % files.pf_conf)
        else:
            print("Custom anchor not found in %s." % files.pf_conf)

        if files.anchor_exists():
            print("Deleting %s..." % files.anchor_file)
            self._change("delete %s" % files.anchor_file, files.remove_anchor)
        else:
            print("No custom anchor file found at %s." % files.anchor_file)

        print("Reloading pf configuration to apply changes...")
        self.engine.reload_config()
        self.engine.enable()

        print("Uninstallation complete. The pf firewall has been restored.")

    def reinstall(self) -> None:
        print("Reinstalling custom pf rules...")
        self.uninstall()
        self.install()

    def _change(self, description: str, func: Callable[..., None], *args: Any) -> None:
        """ Apply a file change, or only describe it on a dry run """
        if self.dry_run:
            print("# %s" % description)
        else:
            func(*args)

    def __repr__(self) -> str:
        return "<Hardening(files=%r, dry_run=%s)>" % (self.files, self.dry_run)
