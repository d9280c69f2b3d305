import logging

from configs import running_in_github_action


class GitHubLogHandler(logging.StreamHandler):
    # Github annotates 'warning' and 'error' and hides 'debug' unless step debugging is enabled.
    # https://docs.github.com/en/actions/using-workflows/workflow-commands-for-github-actions
    # INFO (and NOTSET) is written as plain lines, so it doesn't drown the real annotations.

    @staticmethod
    def log_level_to_github(level: int):
        if level >= logging.ERROR:
            return "error"
        elif level >= logging.WARNING:
            return "warning"
        elif level > logging.DEBUG or level == logging.NOTSET:
            return None
        else:
            return "debug"

    def format(self, record) -> str:
        msg = super().format(record)
        if (level := self.log_level_to_github(record.levelno)) is None:
            return f"{record.name}: {msg}"
        elif level == "debug":
            return f"::debug::{record.name}: {msg}"
        return f"::{level} file={record.filename},line={record.lineno}::{record.name}: {msg}"


def configure_logging():
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)
    if running_in_github_action():
        root_logger.addHandler(GitHubLogHandler())
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        root_logger.addHandler(handler)
    # boto is chatty on INFO:
    for name in ("boto3", "botocore", "urllib3"):
        logging.getLogger(name).setLevel(logging.WARNING)
