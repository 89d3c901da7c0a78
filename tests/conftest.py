"""Test setup for axaml-outline."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


MAIN_WINDOW = """\
<Window xmlns="https://github.com/avaloniaui"
        xmlns:x="http://schemas.microsoft.com/winfx/2006/xaml"
        x:Class="Demo.MainWindow"
        Title="Demo">
    <Grid>
        <Grid.RowDefinitions>
            <RowDefinition Height="Auto"/>
            <RowDefinition Height="*"/>
        </Grid.RowDefinitions>
        <StackPanel Grid.Row="0">
            <Button Content="Click Me!" x:Name="TestButton"/>
            <Button Content="Another Button"/>
            <TextBlock Text="Status: Ready"/>
        </StackPanel>
        <ListBox Grid.Row="1" Name="Items"/>
    </Grid>
</Window>
"""


@pytest.fixture
def main_window_axaml() -> str:
    """A small Avalonia window with nesting, definitions and a multi-line root tag.

    Line numbers (zero-based) of interest:
        0  <Window ...      (opening spans lines 0-3)
        4  <Grid>
        9  <StackPanel>
        10 <Button x:Name="TestButton"/>
        14 <ListBox Name="Items"/>
        16 </Window>
    """
    return MAIN_WINDOW
