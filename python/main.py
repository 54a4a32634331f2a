import argparse
import sys
import os
import logging

sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from lingobridge.errors import ConfigurationError

logger = logging.getLogger("Main")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="LingoBridge translation API server")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--backend", choices=["huggingface", "relay"], default=None,
                        help="Override TRANSLATION_BACKEND")
    parser.add_argument("--log-level", default="info",
                        choices=["critical", "error", "warning", "info", "debug"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format='%(asctime)s [%(levelname)s] %(name)s - %(message)s')

    if args.backend:
        # api_server 쪽 get_translation_config()가 읽어가도록 환경변수로 전달
        os.environ["TRANSLATION_BACKEND"] = args.backend

    from lingobridge.api_server import get_translation_client, run_api_server

    try:
        # 설정 오류는 서버 기동 전에 확인
        get_translation_client()
    except ConfigurationError as e:
        logger.error(f"Configuration Error: {e}")
        return 1

    logger.info(f"Starting LingoBridge on http://{args.host}:{args.port}")
    try:
        run_api_server(args.host, args.port, log_level=args.log_level)
    except KeyboardInterrupt:
        logger.info("User interrupted.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
