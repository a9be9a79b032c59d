"""
Example 01: From a Name to a Line-Encoded Waveform

This example walks through a full conversion:
- Turning text into its 8-bit binary representation
- Drawing the bits with each line-encoding scheme
- Inspecting the vertex sequence behind a waveform
- Exporting the waveforms as PNG images

Learning objectives:
- See how each character becomes 8 bits, MSB first
- Compare how NRZ-L, RZ, Manchester, AMI and CMI represent the same bits
- Understand where level transitions happen and why
"""

import matplotlib.pyplot as plt

from pulsecode import Scheme, convert, generate_all, reselect
from pulsecode.plotting import plot_waveform, save_waveform

NAME = "Ada"

print("=" * 70)
print("EXAMPLE 01: Name to Waveform")
print("=" * 70)

# =============================================================================
# Step 1: Text to Bits
# =============================================================================
print("\n[Step 1] Converting Text to Binary")
print("-" * 70)

result = convert(NAME)

for row in result.breakdown:
    print(f"  '{row.label}' -> {row.code_point:3d} -> {row.bits}")
print(f"\nBinary ({result.bits.size} bits): {result.binary}")

# =============================================================================
# Step 2: One Scheme, Step by Step
# =============================================================================
print("\n[Step 2] Drawing Rules for Bipolar AMI")
print("-" * 70)

ami = reselect(result, Scheme.AMI)
for rule in ami.guide.rules:
    print(f"  - {rule}")

print("\nFirst vertices (position in bits, level, pen-up):")
for vertex in ami.waveform.vertices[:8]:
    print(f"  {vertex.position:5.1f}  {vertex.level.label:>2}  {vertex.starts_new_segment}")
print(f"Edges: {len(ami.waveform.transitions())}")

# =============================================================================
# Step 3: Compare All Schemes
# =============================================================================
print("\n[Step 3] Comparing All Schemes")
print("-" * 70)

waveforms = generate_all(result.bits)

fig, axs = plt.subplots(len(waveforms), 1, figsize=(12, 2.5 * len(waveforms)))
for ax, (scheme, waveform) in zip(axs, waveforms.items()):
    plot_waveform(waveform, ax=ax, title=scheme.display_name)
    print(f"✓ {scheme.display_name:<12} {len(waveform):3d} vertices")

plt.savefig("01_all_schemes.png", dpi=150, bbox_inches="tight")
print("✓ Saved comparison plot: 01_all_schemes.png")

# =============================================================================
# Step 4: Export Individual Images
# =============================================================================
print("\n[Step 4] Exporting Individual Waveforms")
print("-" * 70)

for waveform in waveforms.values():
    path = save_waveform(waveform)
    print(f"✓ {path}")

print("\n" + "=" * 70)
print("Example complete! Check the generated PNG files.")
print("=" * 70)

# Show plots if running interactively
# plt.show()
