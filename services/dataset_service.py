"""
정적 데이터셋(JSON) 로드 서비스
"""
import json


def load_dataset(path):
    """JSON 배열 파일 로드, 실패하면 빈 리스트"""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        print(f"Error loading dataset {path}: {e}")
        return []
    if not isinstance(data, list):
        print(f"Error loading dataset {path}: expected a JSON array")
        return []
    return data
