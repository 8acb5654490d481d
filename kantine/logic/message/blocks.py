from typing import List, Optional

from kantine.domain.Blocks import ImageAccessory, SectionBlock, TextObject


def text_block(text: str) -> List[SectionBlock]:
    return [SectionBlock(text=TextObject(text=text))]


def attachment_block(dish_name: str, image_url: Optional[str] = None) -> SectionBlock:
    """Section for one dish: bold name, plus the image when one was found."""
    if not dish_name or not dish_name.strip():
        raise ValueError("Dish name cannot be blank")
    block = SectionBlock(text=TextObject(text=f"*{dish_name}*"))
    if image_url:
        block.accessory = ImageAccessory(image_url=image_url, alt_text=dish_name)
    return block
