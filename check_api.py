#!/usr/bin/env python3
"""
실행 중인 서버 대상 스모크 테스트 스크립트 (pip install -e .[dev])
"""
import json
import subprocess
import sys
import time

import requests

BASE_URL = "http://localhost:8000"
API_URL = f"{BASE_URL}/api/v1"


def show(title: str, response: requests.Response) -> None:
    print(f"\n{title}")
    print(f"Status: {response.status_code}")
    if response.content:
        print(f"Response: {json.dumps(response.json(), indent=2, ensure_ascii=False)}")


def check_api():
    """API 기본 흐름 테스트: 생성 -> 상태 변경 -> 리포트 -> 삭제"""

    print("🚀 Starting FastAPI server...")
    server_process = subprocess.Popen([
        sys.executable, "run_server.py"
    ], stdout=subprocess.PIPE, stderr=subprocess.PIPE)

    # 서버가 시작될 때까지 대기
    time.sleep(5)

    try:
        show("📊 Health", requests.get(f"{BASE_URL}/health"))

        response = requests.post(f"{API_URL}/orders", json={"quantity": 2, "unitPrice": 10.5})
        show("📦 Create order", response)
        order_id = response.json()["id"]

        show("🔁 Pending -> Active", requests.put(f"{API_URL}/orders/{order_id}/status", json="Active"))
        show("🚚 Active -> Shipped", requests.put(f"{API_URL}/orders/{order_id}/status", json="Shipped"))
        show("⛔ Shipped -> Active", requests.put(f"{API_URL}/orders/{order_id}/status", json="Active"))
        show("📈 Sales report", requests.get(f"{API_URL}/reports/sales"))
        show("🗑️ Delete order", requests.delete(f"{API_URL}/orders/{order_id}"))
        show("🔍 Get deleted order", requests.get(f"{API_URL}/orders/{order_id}"))

        print("\n✅ Smoke test completed")

    except requests.exceptions.ConnectionError:
        print("❌ Failed to connect to server")
    finally:
        print("\n🛑 Stopping server...")
        server_process.terminate()
        server_process.wait()


if __name__ == "__main__":
    check_api()
