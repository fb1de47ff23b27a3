"""Import paths and package names of the testify module."""

MODULE_PATH = "github.com/stretchr/testify"

ASSERT_PKG_NAME = "assert"
REQUIRE_PKG_NAME = "require"
SUITE_PKG_NAME = "suite"

ASSERT_PKG_PATH = f"{MODULE_PATH}/{ASSERT_PKG_NAME}"
REQUIRE_PKG_PATH = f"{MODULE_PATH}/{REQUIRE_PKG_NAME}"
SUITE_PKG_PATH = f"{MODULE_PATH}/{SUITE_PKG_NAME}"