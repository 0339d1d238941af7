import logging
import subprocess
from pathlib import Path

import jsii
from aws_cdk import BundlingOptions, ILocalBundling
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

logger = logging.getLogger(__name__)

LAYER_SOURCE_PATH = "layers/common_layer"


@jsii.implements(ILocalBundling)
class PythonLocalBundling:
    """Docker を使わずに requirements.txt をレイヤーへインストールする"""

    # 先に見つかったインストーラーを使う
    INSTALLERS: tuple[tuple[str, ...], ...] = (
        ("uv", "pip", "install", "--quiet", "-r"),
        ("pip", "install", "--quiet", "-r"),
    )

    def __init__(self, source_path: str) -> None:
        self.source_path = source_path

    def try_bundle(self, output_dir: str, options: BundlingOptions) -> bool:
        """False を返すと CDK は Docker でのバンドリングに切り替える"""
        del options
        requirements_path = Path(self.source_path) / "requirements.txt"
        if not requirements_path.exists():
            logger.warning("requirements.txt not found: %s", requirements_path)
            return False

        target_dir = Path(output_dir) / "python"
        for installer in self.INSTALLERS:
            command = [*installer, str(requirements_path), "--target", str(target_dir)]
            try:
                subprocess.run(command, check=True)
            except FileNotFoundError:
                logger.debug("%s not found", installer[0])
                continue
            except subprocess.CalledProcessError as e:
                logger.debug("%s install failed: %s", installer[0], e)
                continue
            logger.info("Local bundling with %s succeeded", installer[0])
            return True

        logger.warning("Local bundling failed, falling back to Docker")
        return False


class Layers(Construct):
    """依存ライブラリ（Powertools, pydantic）の Lambda Layer"""

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
            description="Travel booking dependencies",
        )
