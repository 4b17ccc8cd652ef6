#!/usr/bin/env python3
"""
Shared Test Constants

Common constants, sample catalogs and helpers used across all test suites.
"""

import json
import subprocess
import sys
import time
from pathlib import Path
from typing import Dict, List, Any


class CommonTestConstants:
    """Constants shared across all test suites"""

    # Timeouts
    DEFAULT_TIMEOUT = 60

    # Paths
    PROJECT_ROOT = Path(__file__).parent.parent
    ENTRY_SCRIPT = PROJECT_ROOT / "catalog-browser.py"
    RESULTS_DIR = "tests/results"

    # Fixed output strings
    UNSUPPORTED = "Unsupported content type"
    DECODE_WARNING = "Failed to decode catalog document"


class CatalogTestConstants(CommonTestConstants):
    """Sample catalogs and expected outputs"""

    # Minimal catalog: one package, one channel, one bundle
    ETCD_CATALOG = """\
---
schema: olm.package
name: etcd
defaultChannel: stable
---
schema: olm.channel
name: stable
package: etcd
entries:
  - name: etcd.v1
---
schema: olm.bundle
name: etcd.v1
package: etcd
image: quay.io/etcd:v1
properties:
  - type: olm.package
    value:
      packageName: etcd
      version: 1.0.0
"""

    ETCD_CHANNEL_BLOCK = "Channel: stable\n  Package: etcd\n  Entries:\n    - etcd.v1"
    ETCD_BUNDLE_JSON = (
        '{\n'
        '  "name": "etcd.v1",\n'
        '  "image": "quay.io/etcd:v1",\n'
        '  "package": "etcd"\n'
        '}'
    )
    ETCD_PACKAGE_JSON = '{\n  "name": "etcd"\n}'

    # Two packages, an upgrade graph, and documents that must be skipped:
    # unknown schema (#3), missing bundle image (#7), broken YAML (#9)
    MIXED_CATALOG = """\
# Operator catalog
---
schema: olm.package
name: quay-operator
---
schema: olm.package
name: argocd-operator
---
schema: olm.unknown
name: mystery
---
schema: olm.channel
name: stable-3.10
package: quay-operator
entries:
  - name: quay-operator.v3.10.0
  - name: quay-operator.v3.10.1
    replaces: quay-operator.v3.10.0
    skips:
      - quay-operator.v3.9.0
      - quay-operator.v3.9.1
    SkipRange: '>=3.9.0 <3.10.1'
---
schema: olm.channel
name: stable-3.9
package: quay-operator
entries:
  - name: quay-operator.v3.9.1
---
schema: olm.bundle
name: quay-operator.v3.10.1
package: quay-operator
image: registry.redhat.io/quay/quay-operator-bundle:v3.10.1
---
schema: olm.bundle
name: quay-operator.v3.10.0
package: quay-operator
---
schema: olm.channel
name: alpha
package: argocd-operator
entries:
  - name: argocd-operator.v0.8.0
---
schema: olm.bundle
name: [unterminated
---
schema: olm.bundle
name: argocd-operator.v0.8.0
package: argocd-operator
image: quay.io/argoprojlabs/argocd-operator-bundle:v0.8.0
"""

    QUAY_STABLE_BLOCK = (
        "Channel: stable-3.10\n"
        "  Package: quay-operator\n"
        "  Entries:\n"
        "    - quay-operator.v3.10.0\n"
        "    - quay-operator.v3.10.1\n"
        "      replaces: quay-operator.v3.10.0\n"
        '      skips: ["quay-operator.v3.9.0", "quay-operator.v3.9.1"]\n'
        "      skip_range: >=3.9.0 <3.10.1"
    )

    # Same package name twice; listed once, in first-seen position
    DUPLICATE_PACKAGE_CATALOG = """\
schema: olm.package
name: etcd
description: first
---
schema: olm.package
name: cockroachdb
---
schema: olm.package
name: etcd
description: second
"""

    # `opm render` style JSON stream: one compact line, one pretty-printed
    # object, one malformed line
    JSON_CATALOG = """\
{"schema": "olm.package", "name": "etcd"}
{
  "schema": "olm.channel",
  "name": "stable",
  "package": "etcd",
  "entries": [{"name": "etcd.v1"}]
}
{"schema": "olm.bundle", "name": "broken
{"schema": "olm.bundle", "name": "etcd.v1", "package": "etcd", "image": "quay.io/etcd:v1"}
"""

    CONFIG_TEMPLATE_KEYS = ["catalog", "output", "global"]


class TestUtilities:
    """
    Shared test utility methods for all test suites.

    Provides path setup, catalog file creation and result formatting
    across the catalog and CLI test suites.
    """

    @staticmethod
    def setup_test_path():
        """Setup Python path so catalog_browser imports from the source tree"""
        project_root = str(CommonTestConstants.PROJECT_ROOT)
        if project_root not in sys.path:
            sys.path.insert(0, project_root)

    @staticmethod
    def write_catalog(directory: Path, content: str, filename: str = "catalog.yaml") -> Path:
        """
        Write catalog content to a file

        Args:
            directory: Target directory
            content: Catalog text
            filename: File name (suffix selects the stream format)

        Returns:
            Path to the written file
        """
        catalog_file = Path(directory) / filename
        catalog_file.write_text(content, encoding="utf-8")
        return catalog_file

    @staticmethod
    def create_test_result(test_name: str, success: bool, details: Dict, duration: float = 0.0) -> Dict:
        """
        Create standardized test result structure

        Args:
            test_name: Name of the test
            success: Whether the test passed
            details: Test details dictionary
            duration: Test duration in seconds

        Returns:
            Standardized test result dictionary
        """
        return {
            "test": test_name,
            "success": success,
            "duration": duration,
            "details": details
        }

    @staticmethod
    def get_results_dir() -> str:
        """
        Get the full path to the test results directory, creating it if needed

        Returns:
            Full path to the results directory
        """
        results_dir = CommonTestConstants.PROJECT_ROOT / CommonTestConstants.RESULTS_DIR
        results_dir.mkdir(exist_ok=True)
        return str(results_dir)


class BaseTestSuite:
    """
    Base test suite class providing shared functionality for all test suites.

    Centralizes command execution and result management.
    """

    def __init__(self):
        """Initialize base test suite"""
        self.test_results = []

    def run_command(self, args: List[str], timeout: int = CommonTestConstants.DEFAULT_TIMEOUT) -> Dict[str, Any]:
        """
        Run the catalog-browser entry script and return structured results.

        Args:
            args: Command-line arguments for catalog-browser
            timeout: Command timeout in seconds

        Returns:
            Dictionary with command results including:
            - success: bool indicating if command succeeded
            - returncode: Process return code
            - stdout: Standard output
            - stderr: Standard error
            - command: Command string for logging
        """
        cmd = [sys.executable, str(CommonTestConstants.ENTRY_SCRIPT)] + [str(a) for a in args]
        try:
            result = subprocess.run(
                cmd,
                text=True,
                capture_output=True,
                timeout=timeout
            )
            return {
                "success": result.returncode == 0,
                "returncode": result.returncode,
                "stdout": result.stdout,
                "stderr": result.stderr,
                "command": ' '.join(cmd)
            }
        except subprocess.TimeoutExpired:
            return {
                "success": False,
                "returncode": -1,
                "stdout": "",
                "stderr": f"Command timed out after {timeout} seconds",
                "command": ' '.join(cmd)
            }

    def create_test_result(self, test_name: str, success: bool, details: Dict[str, Any],
                           duration: float = 0.0) -> Dict[str, Any]:
        """Create standardized test result structure"""
        return TestUtilities.create_test_result(test_name, success, details, duration)

    def print_test_status(self, test_name: str, success: bool, message: str = "") -> None:
        """Print test status with consistent formatting"""
        status = "✅" if success else "❌"
        print(f"   {status} {test_name}: {message}")

    def save_results(self, filename: str, test_suite_name: str,
                     configuration: Dict[str, Any] = None) -> None:
        """
        Save test results to JSON file in results directory.

        Args:
            filename: Name of the results file
            test_suite_name: Name of the test suite
            configuration: Optional configuration dictionary
        """
        results_file = Path(TestUtilities.get_results_dir()) / filename

        summary = {
            "test_suite": test_suite_name,
            "timestamp": time.time(),
            "configuration": configuration or {},
            "results": self.test_results
        }

        with open(results_file, 'w') as f:
            json.dump(summary, f, indent=2)

        print(f"📄 Test results saved to: {results_file}")
