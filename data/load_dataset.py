import pandas as pd
import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
from utils.board_utils import board_from_string


class SudokuDataset:
    """
    quizzes,solutions 컬럼을 가진 CSV (Kaggle 1M sudoku 포맷).
    solutions 컬럼이 없으면 정답은 None 으로 반환.
    """

    def __init__(self, csv_path):
        self.csv_path = csv_path
        if csv_path and os.path.exists(csv_path):
            # 문자열로 읽어야 앞자리 0 이 안 날아감
            self.df = pd.read_csv(csv_path, dtype=str)
        else:
            raise FileNotFoundError(f"CSV file not found at {csv_path}")

        if 'quizzes' not in self.df.columns:
            raise ValueError(f"{csv_path} has no 'quizzes' column")

    def __len__(self):
        return len(self.df)

    def __getitem__(self, idx):
        # 요청받은 idx의 데이터만 그때그때 변환
        row = self.df.iloc[idx]
        quiz = board_from_string(row['quizzes'])

        solution = None
        if 'solutions' in self.df.columns and isinstance(row['solutions'], str):
            solution = board_from_string(row['solutions'])

        return quiz, solution
