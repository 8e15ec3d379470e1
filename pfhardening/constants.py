""" Fixed locations, actions and the ruleset installed into the anchor """

ANCHOR_NAME = "pf-hardening"
ANCHORS_DIR = "/etc/pf.anchors"
ANCHOR_FILE = "%s/%s" % (ANCHORS_DIR, ANCHOR_NAME)
PF_CONF = "/etc/pf.conf"
BACKUP_FILE = "/etc/pf.conf.backup"

# Suffix of the copy taken right before the main config is rewritten
EDIT_BACKUP_SUFFIX = ".bak"

PFCTL = "pfctl"
DEFAULT_ENGINE = "pfctl"

ACTION_INSTALL = "install"
ACTION_REINSTALL = "reinstall"
ACTION_UNINSTALL = "uninstall"
ACTIONS = [ACTION_INSTALL, ACTION_REINSTALL, ACTION_UNINSTALL]

# Include block appended to the main config
INCLUDE_COMMENT = "# Load custom security rules from '%(name)s' anchor"
INCLUDE_ANCHOR = 'anchor "%(name)s"'
INCLUDE_LOAD = 'load anchor "%(name)s" from "%(path)s"'

RULESET = """\
# Allow loopback traffic for internal communications
set skip on lo0

# Normalize incoming traffic to reassemble fragments
scrub in all

# Default deny policy: Block everything by default
block all

# Allow necessary ICMP for PMTUD and diagnostic tools in IPv4
pass in inet proto icmp icmp-type 8 no state        # Echo Request (ping)
pass in inet proto icmp icmp-type 3 code 4 no state # Destination Unreachable - Frag Needed (PMTUD)
pass in inet proto icmp icmp-type 11 no state       # Time Exceeded (traceroute)

# Allow necessary ICMPv6 messages for PMTUD and Neighbor Discovery Protocol (NDP)
pass in inet6 proto icmp6 icmp6-type 128 no state   # Echo Request (ping)
pass in inet6 proto icmp6 icmp6-type 2 no state     # Packet Too Big (PMTUD)
pass in inet6 proto icmp6 icmp6-type 3 no state     # Time Exceeded (traceroute)
pass in inet6 proto icmp6 icmp6-type 133 no state   # NDP Router Solicitation
pass in inet6 proto icmp6 icmp6-type 134 no state   # NDP Router Advertisement
pass in inet6 proto icmp6 icmp6-type 135 no state   # NDP Neighbor Solicitation
pass in inet6 proto icmp6 icmp6-type 136 no state   # NDP Neighbor Advertisement

# Optionally allow incoming SSH traffic on port 22
#pass in proto tcp from any to any port 22 keep state

# Allow all outgoing traffic and keep state for reply packets
pass out keep state
"""
