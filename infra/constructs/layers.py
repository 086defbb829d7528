import logging
import subprocess
from pathlib import Path

import jsii
from aws_cdk import BundlingOptions, ILocalBundling
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

logger = logging.getLogger(__name__)

LAYER_RUNTIME = _lambda.Runtime.PYTHON_3_12


@jsii.implements(ILocalBundling)
class PythonLocalBundling:
    """requirements.txt の依存をローカルでインストールする Bundling クラス

    uv → pip の順に試し、どちらも使えなければ Docker バンドリングに任せる。
    """

    def __init__(self, source_path: str) -> None:
        self.source_path = source_path

    def try_bundle(self, output_dir: str, options: BundlingOptions) -> bool:
        """ローカルでバンドリングを試行する。

        Returns:
            True: バンドリング成功（Docker をスキップ）
            False: バンドリング失敗（Docker にフォールバック）
        """
        del options
        requirements_path = Path(self.source_path) / "requirements.txt"
        target_dir = Path(output_dir) / "python"

        if not requirements_path.exists():
            logger.warning("requirements.txt not found: %s", requirements_path)
            return False

        for installer in (self._uv_command, self._pip_command):
            if self._run(installer(requirements_path, target_dir)):
                return True

        logger.warning("Local bundling failed, falling back to Docker")
        return False

    @staticmethod
    def _uv_command(requirements_path: Path, target_dir: Path) -> list[str]:
        return [
            "uv",
            "pip",
            "install",
            "-r",
            str(requirements_path),
            "--target",
            str(target_dir),
            "--quiet",
        ]

    @staticmethod
    def _pip_command(requirements_path: Path, target_dir: Path) -> list[str]:
        return [
            "pip",
            "install",
            "-r",
            str(requirements_path),
            "-t",
            str(target_dir),
            "--quiet",
        ]

    @staticmethod
    def _run(command: list[str]) -> bool:
        tool = command[0]
        try:
            logger.info("Trying local bundling with %s...", tool)
            subprocess.run(command, check=True)
        except FileNotFoundError:
            logger.debug("%s not found", tool)
            return False
        except subprocess.CalledProcessError as e:
            logger.debug("%s install failed: %s", tool, e)
            return False
        logger.info("Local bundling with %s succeeded", tool)
        return True


class Layers(Construct):
    """Lambda Layers Construct

    common_layer: powertools / pydantic など全関数共通の依存
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        source_path: str = "layers/common_layer",
    ) -> None:
        super().__init__(scope, id)

        self.common_layer = _lambda.LayerVersion(
            self,
            "CommonLayer",
            code=_lambda.Code.from_asset(
                source_path,
                bundling=BundlingOptions(
                    image=LAYER_RUNTIME.bundling_image,
                    command=[
                        "bash",
                        "-c",
                        "pip install -r requirements.txt -t /asset-output/python",
                    ],
                    local=PythonLocalBundling(source_path),
                ),
            ),
            compatible_runtimes=[LAYER_RUNTIME],
            description="Ticket machine common dependencies",
        )
