import argparse
import json
import sys
import requests
from tabulate import tabulate
import config


class ShareReconClient:
    def __init__(self, server_url=None, timeout=config.Config.REQUEST_TIMEOUT):
        self.server_url = server_url or config.Config.server_url()
        self.timeout = timeout

    def reconstruct_document(self, document, strict=False, cross_check=False):
        """Post a share document; returns (ok, payload)"""
        params = {}
        if strict:
            params["strict"] = "1"
        if cross_check:
            params["cross_check"] = "1"
        response = requests.post(
            f"{self.server_url}/reconstruct",
            json=document,
            params=params,
            timeout=self.timeout
        )
        return response.status_code == 200, response.json()

    def reconstruct_file(self, path, **options):
        with open(path, "r") as f:
            document = json.load(f)
        return self.reconstruct_document(document, **options)

    def get_audit(self, reconstruction_id):
        response = requests.get(
            f"{self.server_url}/audit/{reconstruction_id}",
            timeout=self.timeout
        )
        if response.status_code == 200:
            return response.json()
        return None


def format_results(results):
    rows = []
    for path, ok, payload in results:
        if ok:
            rows.append([path, "ok", payload["secret"], payload["commitment"][:16]])
        else:
            rows.append([path, payload.get("type", "error"), payload.get("error", ""), ""])
    return tabulate(rows, headers=["File", "Status", "Secret / Error", "Commitment"], disable_numparse=True)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Send share documents to a sharerecon server.")
    parser.add_argument("files", nargs="+", help="Share documents (JSON).")
    parser.add_argument("--server", default=config.Config.server_url(), help="Server base URL.")
    parser.add_argument("--strict", action="store_true", help="Reject noise characters in values.")
    parser.add_argument("--cross-check", action="store_true", help="Verify shares beyond the first k.")
    args = parser.parse_args(argv)

    client = ShareReconClient(args.server)
    results = []
    for path in args.files:
        try:
            ok, payload = client.reconstruct_file(
                path, strict=args.strict, cross_check=args.cross_check
            )
        except requests.exceptions.ConnectionError:
            print(f"\nERROR: Could not connect to sharerecon server at {args.server}", file=sys.stderr)
            return 1
        results.append((path, ok, payload))

    print(format_results(results))
    return 0 if all(ok for _, ok, _ in results) else 1


if __name__ == "__main__":
    sys.exit(main())
