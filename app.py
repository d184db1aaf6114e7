# app.py
import argparse
import json
import logging
import os
from datetime import datetime

from flask import Flask, request, jsonify

from seolens import SEOAnalyzer, MemStorage, FetchError
from seolens.config import load_config, default_config
from seolens.document import extract_domain
from seolens.scoring import score_color

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

# --- Flask App Setup ---
app = Flask(__name__)
# Replaced by run_cli when a --config file is given
flask_app_config = default_config()
storage = MemStorage(recent_limit=flask_app_config["Storage"]["recent_limit"])


def format_text_report(report: dict) -> str:
    lines = [
        f"URL Analyzed: {report['url']}",
        f"Timestamp: {report['analyzedAt']}",
        f"Overall SEO Score: {report['totalScore']} ({report['scoreRating']})",
    ]
    for key, label in (("metaTags", "Meta Tags"), ("socialMedia", "Social Media"), ("technicalSeo", "Technical SEO")):
        category = report[key]
        lines.append("")
        lines.append(f"{label}: {category['score']} [{score_color(category['score'])}]")
        for item in category["items"]:
            detail = item.get("message") or item.get("value") or ""
            lines.append(f"  [{item['status']}] {item['name']}: {detail}")
    if report["recommendations"]:
        lines.append("")
        lines.append("Recommendations:")
        for rec in report["recommendations"]:
            lines.append(f"  ({rec['priority']}) {rec['title']}: {rec['description']}")
            if rec.get("code"):
                lines.append(f"      {rec['code']}")
    return "\n".join(lines) + "\n"


def save_report_to_file(report: dict, output_format: str = "json", filename_prefix: str = "seo_report") -> str | None:
    if not os.path.exists("reports"):
        os.makedirs("reports")
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    safe_domain_name = extract_domain(report["url"]).replace(".", "_")
    filename = f"reports/{filename_prefix}_{safe_domain_name}_{timestamp}.{output_format}"
    try:
        with open(filename, "w") as f:
            if output_format == "json":
                json.dump(report, f, indent=4)
            else:
                f.write(format_text_report(report))
        logger.info("Report saved to %s", filename)
        return filename
    except IOError as e:
        logger.error("Error saving report: %s", e)
        return None


# --- Flask Routes ---
@app.route("/api/analyze", methods=["POST"])
def analyze_endpoint():
    data = request.get_json(silent=True)
    url_to_analyze = data.get("url") if isinstance(data, dict) else None
    if not isinstance(url_to_analyze, str) or not url_to_analyze.strip():
        return jsonify({"message": "URL is required", "userMessage": "Please enter a website URL to analyze"}), 400

    analyzer_instance = SEOAnalyzer(config=flask_app_config, storage=storage)
    try:
        result = analyzer_instance.run_analysis(target_url=url_to_analyze)
        return jsonify(result.to_dict())
    except FetchError as e:
        logger.warning("Analysis of %s failed (%s): %s", url_to_analyze, e.kind, e)
        return jsonify(e.to_dict()), e.http_status
    except Exception as e:
        logger.exception("Unexpected error analyzing %s", url_to_analyze)
        return jsonify({
            "message": str(e),
            "userMessage": "An error occurred while analyzing the URL. Please try again.",
        }), 500


@app.route("/api/recent-analyses", methods=["GET"])
def recent_analyses_endpoint():
    limit = request.args.get("limit", type=int)
    return jsonify(storage.get_recent_analyses(limit))


def run_cli(argv=None):
    parser = argparse.ArgumentParser(description="Single-page SEO analyzer")
    parser.add_argument("url", nargs="?", default=None, help="The URL to analyze (omit to run in API/server mode).")
    parser.add_argument("--output", choices=["json", "txt"], default="json", help="Output format for the report.")
    parser.add_argument("--config", type=str, default=None, help="Path to a JSON config file.")
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds (overrides config).")
    parser.add_argument("--host", type=str, default=None, help="Host for API mode (overrides config).")
    parser.add_argument("--port", type=int, default=None, help="Port for API mode (overrides config).")
    args = parser.parse_args(argv)

    global flask_app_config
    current_config = load_config(args.config)
    if args.timeout is not None:
        current_config["Global"]["request_timeout"] = args.timeout
    flask_app_config = current_config

    # If URL is not provided, run in API/server mode. Otherwise, run in CLI mode.
    if not args.url:
        host = args.host or current_config["Server"]["host"]
        port = args.port or current_config["Server"]["port"]
        storage.recent_limit = current_config["Storage"]["recent_limit"]
        logger.info("Starting Flask server on http://%s:%s/ (API mode)", host, port)
        app.run(host=host, port=port, debug=False)
        return 0

    try:
        result = SEOAnalyzer(config=current_config).run_analysis(args.url)
    except FetchError as e:
        print(f"Error: {e.user_message}")
        logger.debug("Fetch failure kind=%s: %s", e.kind, e)
        return 1

    report = result.to_dict()
    print("\n--- Analysis Summary ---")
    print(f"URL Analyzed: {report['url']}")
    print(f"Timestamp: {report['analyzedAt']}")
    print(f"Overall SEO Score: {report['totalScore']} ({report['scoreRating']})")
    print(f"Meta Tags: {result.meta_tags.score} | Social Media: {result.social_media.score} | Technical SEO: {result.technical_seo.score}")
    save_report_to_file(report, output_format=args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(run_cli())
