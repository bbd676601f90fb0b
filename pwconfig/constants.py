# Where: pwconfig/constants.py
# What: Environment variable names and fixed policy values for test-run configuration.
# Why: Keep every literal consulted by the resolver in one place.

# Environment variables read by EnvSettings.
ENV_MODE = "PWTEST_MODE"
ENV_CHANNEL = "PWTEST_CHANNEL"
ENV_VIDEO = "PWTEST_VIDEO"
ENV_TRACE = "PWTEST_TRACE"
ENV_HEADED = "PWTEST_HEADED"
ENV_CI = "CI"
ENV_DEVTOOLS = "DEVTOOLS"
ENV_INSIDE_DOCKER = "INSIDE_DOCKER"
ENV_WORKER_INDEX = "TEST_WORKER_INDEX"
ENV_CHROMIUM_PATH = "CRPATH"
ENV_FIREFOX_PATH = "FFPATH"
ENV_WEBKIT_PATH = "WKPATH"
ENV_SERVICE_URL = "PLAYWRIGHT_SERVICE_URL"
ENV_SERVICE_ACCESS_KEY = "PLAYWRIGHT_SERVICE_ACCESS_KEY"
ENV_SERVICE_OS = "PLAYWRIGHT_SERVICE_OS"
ENV_SERVICE_RUN_ID = "PLAYWRIGHT_SERVICE_RUN_ID"
ENV_GRID_URL = "PLAYWRIGHT_GRID_URL"
ENV_GRID_ACCESS_KEY = "PLAYWRIGHT_GRID_ACCESS_KEY"

# Environment override handed to the runner in service-with-capabilities mode.
ENV_VERSION_OVERRIDE = "PW_VERSION_OVERRIDE"
VERSION_OVERRIDE = "1.37"

HEADED_FLAG = "--headed"
DEVTOOLS_ENABLED = "1"

# Browser engines and suite folders.
ENGINE_CHROMIUM = "chromium"
ENGINE_FIREFOX = "firefox"
ENGINE_WEBKIT = "webkit"
DEFAULT_ENGINES = (ENGINE_CHROMIUM, ENGINE_WEBKIT, ENGINE_FIREFOX)
DEFAULT_FOLDERS = ("library", "page")

EXECUTABLE_PATH_ENV = {
    ENGINE_CHROMIUM: ENV_CHROMIUM_PATH,
    ENGINE_FIREFOX: ENV_FIREFOX_PATH,
    ENGINE_WEBKIT: ENV_WEBKIT_PATH,
}

SNAPSHOT_PATH_TEMPLATE = "{testDir}/{testFileDir}/{testFileName}-snapshots/{arg}{-projectName}{ext}"
VISUAL_COMPARATOR = "ssim-cie94"

# Remote endpoints.
RELAY_PORT = 3333
LOCAL_WS_ENDPOINT = f"ws://localhost:{RELAY_PORT}"
LOCAL_HTTP_URL = f"http://localhost:{RELAY_PORT}"
RELAY_COMMAND = f"npx playwright run-server --port={RELAY_PORT}"
GRID_CLI = "node ../../packages/playwright-grid/cli.js"
GRID_NODE_COUNT = 2
GRID_NODE_CAPACITY = 2
# Non-production placeholder; real deployments inject PLAYWRIGHT_GRID_ACCESS_KEY.
DEFAULT_GRID_ACCESS_KEY = "secret"
ACCESS_KEY_HEADER = "x-playwright-access-key"
EXPOSE_LOOPBACK = "<loopback>"
DEFAULT_SERVICE_OS = "linux"

SERVICE_CONNECT_TIMEOUT_MS = 3 * 60 * 1000
GRID_CONNECT_TIMEOUT_MS = 60 * 60 * 1000

# Global run policy.
OUTPUT_DIR_NAME = "test-results"
TEST_DIR_NAME = "tests"
REPORT_FILE_NAME = "report.json"
EXPECT_TIMEOUT_MS = 10_000
TEST_TIMEOUT_MS = 30_000
VIDEO_TEST_TIMEOUT_MS = 60_000
GLOBAL_TIMEOUT_MS = 5_400_000
MAX_FAILURES = 200
CI_WORKERS = 2
CI_RETRIES = 3
