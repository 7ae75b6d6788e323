"""
Constants for manual page generation.
"""

# Grammar node attributes
NO_ID = "no-id"
HELP_ATTR = "help"

# Placeholders used when a value node carries no id
PLACEHOLDER_NUM = "NUM"
PLACEHOLDER_ARG = "ARG"

# Page identity
SHELL_NAME = "grcli"
PRODUCT_NAME = "grout"
MAN_SECTION = "1"
DEFAULT_VERSION = "dev"
DEFAULT_SOCK_PATH = "/run/grout.sock"

# Environment
ENV_GRAMMAR = "GRCLI_MAN_GRAMMAR"
ENV_VERSION = "GROUT_VERSION"
ENV_SOCK_PATH = "GROUT_SOCK_PATH"

ENV_DPRC_DESCRIPTION = (
    "Set the DPRC - Datapath Resource Container: This value should match the one used "
    "by DPDK during the scan of the fslmc bus. It is recommended to set this on any NXP "
    "QorIQ targets. This serves as the entry point for grcli to enable autocompletion of "
    "fslmc devices manageable by grout. While grcli can configure grout without this "
    "environment setting, autocompletion of the devargs will not be available."
)

ENV_SOCK_PATH_DESCRIPTION = (
    "Path to the control plane API socket. If not set, defaults to _{sock_path}_."
)

REPORTING_BUGS = (
    "Report bugs to the grout project issue tracker at "
    "<https://github.com/DPDK/grout/issues>."
)

# Cross-reference table: argument ids per sibling topic page
XREF_INTERFACE_IDS = ("IFACE", "NAME")
XREF_VRF_IDS = ("VRF",)
XREF_NEXTHOP_IDS = ("NH", "NH_ID", "SEGLIST")
XREF_ADDRESS_IDS = ("ADDR", "IP", "DEST")
