import json
import sys

import matplotlib.pyplot as plt
import numpy as np

# --- CONFIGURATION ---
# written by: python scripts/solve_hand.py ... --json solve.json
DATA_FILE = sys.argv[1] if len(sys.argv) > 1 else 'solve.json'

# 1. LOAD THE DATA
try:
    with open(DATA_FILE, 'r', encoding='utf-8') as f:
        data = json.load(f)
    print(f"Loaded solve for {' '.join(data['hand'])} from {DATA_FILE}.")
except FileNotFoundError:
    print(f"Error: Could not find '{DATA_FILE}'. Run scripts/solve_hand.py with --json first.")
    sys.exit(1)

ranked = [data['optimal']] + data['alternatives']


# --- GRAPH 1: EV OF EVERY HOLD ---
def plot_hold_evs():
    labels = [' '.join(r['held']) or '(none)' for r in ranked]
    evs = np.array([r['expected_value'] for r in ranked])

    plt.figure(figsize=(14, 6))
    colors = ['#2ca02c'] + ['#1f77b4'] * (len(evs) - 1)
    bars = plt.bar(range(len(evs)), evs, color=colors, edgecolor='black', linewidth=1)
    plt.axhline(1.0, color='red', linestyle='--', linewidth=1.5, label='Break Even (1x)')

    plt.title(f"Hold EVs: {' '.join(data['hand'])} ({data['pay_table']['name']})", fontsize=14, fontweight='bold')
    plt.xlabel('Hold', fontsize=12)
    plt.ylabel('Expected Value (x bet)', fontsize=12)
    plt.xticks(range(len(evs)), labels, rotation=70, ha='right', fontsize=8)
    plt.legend()
    plt.grid(True, alpha=0.3, axis='y')

    # label the top few
    for bar in bars[:3]:
        height = bar.get_height()
        plt.text(bar.get_x() + bar.get_width() / 2., height, f'{height:.3f}', ha='center', va='bottom', fontsize=9)

    plt.tight_layout()
    plt.savefig('graph_hold_evs.png', dpi=300)
    print("Saved 'graph_hold_evs.png'")
    plt.show()


# --- GRAPH 2: OUTCOME MIX OF THE BEST HOLD ---
def plot_best_outcomes():
    probs = data['optimal']['category_probabilities']
    cats = [c for c, p in probs.items() if p > 0]
    vals = np.array([probs[c] for c in cats]) * 100

    plt.figure(figsize=(10, 6))
    plt.barh(cats, vals, color='#1f77b4', edgecolor='black')
    plt.xscale('log')
    plt.title(f"Outcome mix: {data['optimal']['description']}", fontsize=14, fontweight='bold')
    plt.xlabel('Probability (%)', fontsize=12)
    plt.grid(True, alpha=0.3, axis='x')
    plt.tight_layout()
    plt.savefig('graph_best_outcomes.png', dpi=300)
    print("Saved 'graph_best_outcomes.png'")
    plt.show()


if __name__ == "__main__":
    print("\nGenerating hold EV graphs...\n")
    plot_hold_evs()
    plot_best_outcomes()
    print("\nAll graphs generated.")
