import logging
import subprocess
from pathlib import Path

import jsii
from aws_cdk import BundlingOptions, ILocalBundling
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

logger = logging.getLogger(__name__)

LAYER_SOURCE_PATH = "layers/common_layer"

# 優先順に試すインストーラ（uv がなければ pip）
INSTALLERS: tuple[tuple[str, ...], ...] = (
    ("uv", "pip", "install", "--quiet", "--target"),
    ("pip", "install", "--quiet", "-t"),
)


@jsii.implements(ILocalBundling)
class PythonLocalBundling:
    """requirements.txt の依存をローカルでレイヤー形式に展開する"""

    def __init__(self, source_path: str) -> None:
        self.source_path = source_path

    def try_bundle(self, output_dir: str, options: BundlingOptions) -> bool:
        """ローカルでバンドリングを試行する。

        Returns:
            True: いずれかのインストーラで成功（Dockerをスキップ）
            False: 全て失敗（Dockerにフォールバック）
        """
        del options  # unused
        requirements_path = Path(self.source_path) / "requirements.txt"
        target_dir = Path(output_dir) / "python"

        if not requirements_path.exists():
            logger.warning("requirements.txt not found: %s", requirements_path)
            return False

        for installer in INSTALLERS:
            if self._install(installer, requirements_path, target_dir):
                return True

        logger.warning("Local bundling failed, falling back to Docker")
        return False

    def _install(
        self, installer: tuple[str, ...], requirements_path: Path, target_dir: Path
    ) -> bool:
        command = [*installer, str(target_dir), "-r", str(requirements_path)]
        try:
            subprocess.run(command, check=True)
        except FileNotFoundError:
            logger.debug("%s not found", installer[0])
            return False
        except subprocess.CalledProcessError as e:
            logger.debug("%s install failed: %s", installer[0], e)
            return False
        logger.info("Local bundling with %s succeeded", installer[0])
        return True


class Layers(Construct):
    """Lambda Layers Construct（powertools / pydantic）"""

    def __init__(self, scope: Construct, id: str) -> None:
        super().__init__(scope, id)

        self.common_layer = _lambda.LayerVersion(
            self,
            "CommonLayer",
            code=_lambda.Code.from_asset(
                LAYER_SOURCE_PATH,
                bundling=BundlingOptions(
                    image=_lambda.Runtime.PYTHON_3_14.bundling_image,
                    command=[
                        "bash",
                        "-c",
                        "pip install -r requirements.txt -t /asset-output/python",
                    ],
                    local=PythonLocalBundling(LAYER_SOURCE_PATH),
                ),
            ),
            compatible_runtimes=[_lambda.Runtime.PYTHON_3_14],
            description="Flight booking API dependencies",
        )
